import time
import logging
from typing import Any, Callable, Dict, Generic, Optional, TypeVar
from caniburn.exceptions import ValidationFailure

logger = logging.getLogger(__name__)

T = TypeVar('T')


class CacheEntry(Generic[T]):
	__slots__ = ("payload", "fetched_at")

	def __init__(self, payload: T, fetched_at: float):
		self.payload = payload
		self.fetched_at = fetched_at


class TTLCache(Generic[T]):
	"""
	Instance-scoped key/value cache with a fixed time-to-live.
	
	Expiry is checked when an entry is read: a stale entry is dropped and
	reported as a miss. Nothing is evicted in the background.
	"""
	
	def __init__(self, ttl_seconds: float, clock: Callable[[], float] = time.monotonic):
		if ttl_seconds <= 0:
			raise ValidationFailure("ttl_seconds", ttl_seconds, "must be positive")
		self.ttl_seconds = ttl_seconds
		self._clock = clock
		self._entries: Dict[str, CacheEntry[T]] = {}
	
	def create(self, key: str, value: T) -> None:
		"""
		Create or replace the entry for a key, stamped with the current clock.
		
		Args:
			key: Request-shape specific cache key
			value: Payload to store
		"""
		self._entries[key] = CacheEntry(value, self._clock())
	
	def read(self, key: str) -> Optional[T]:
		"""
		Read a live entry.
		
		Args:
			key: Cache key
		
		Returns:
			The cached payload, or None if the key is missing or expired
		"""
		entry = self._entries.get(key)
		if entry is None:
			return None
		if self._clock() - entry.fetched_at >= self.ttl_seconds:
			logger.debug(f"Cache entry {key} expired")
			del self._entries[key]
			return None
		return entry.payload
	
	def exists(self, key: str) -> bool:
		return self.read(key) is not None
	
	def delete(self, key: str) -> bool:
		return self._entries.pop(key, None) is not None
	
	def clear(self) -> None:
		self._entries.clear()
	
	def __len__(self) -> int:
		return len(self._entries)
