"""
Unit tests for TTLCache.
"""
import pytest
from caniburn.exceptions import ValidationFailure
from caniburn.utils.ttl_cache import TTLCache


class TestTTLCache:
	"""Test cases for TTLCache."""
	
	def test_read_missing_key(self, fake_clock):
		cache = TTLCache(60, clock=fake_clock)
		assert cache.read("missing") is None
	
	def test_read_within_ttl(self, fake_clock):
		cache = TTLCache(60, clock=fake_clock)
		cache.create("fires_Ontario", ["fire"])
		
		fake_clock.return_value = 1059.9
		assert cache.read("fires_Ontario") == ["fire"]
	
	def test_entry_expires_on_read(self, fake_clock):
		"""Test that a stale entry is dropped when read."""
		cache = TTLCache(60, clock=fake_clock)
		cache.create("fires_Ontario", ["fire"])
		
		fake_clock.return_value = 1060.0
		assert len(cache) == 1  # not evicted until read
		assert cache.read("fires_Ontario") is None
		assert len(cache) == 0
	
	def test_empty_payload_is_a_hit(self, fake_clock):
		"""An empty list is a cached answer, not a miss."""
		cache = TTLCache(60, clock=fake_clock)
		cache.create("nearby_45.000_-75.000", [])
		assert cache.read("nearby_45.000_-75.000") == []
		assert cache.exists("nearby_45.000_-75.000") is True
	
	def test_create_refreshes_timestamp(self, fake_clock):
		cache = TTLCache(60, clock=fake_clock)
		cache.create("key", 1)
		fake_clock.return_value = 1050.0
		cache.create("key", 2)
		fake_clock.return_value = 1100.0
		assert cache.read("key") == 2
	
	def test_delete_and_clear(self, fake_clock):
		cache = TTLCache(60, clock=fake_clock)
		cache.create("a", 1)
		cache.create("b", 2)
		
		assert cache.delete("a") is True
		assert cache.delete("a") is False
		cache.clear()
		assert len(cache) == 0
	
	def test_ttl_must_be_positive(self):
		with pytest.raises(ValidationFailure):
			TTLCache(0)
	
	def test_instances_do_not_share_entries(self, fake_clock):
		first = TTLCache(60, clock=fake_clock)
		second = TTLCache(60, clock=fake_clock)
		first.create("key", 1)
		assert second.read("key") is None
