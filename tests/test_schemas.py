"""
Unit tests for caniburn schemas.
"""
import pytest
from datetime import datetime, timezone
from pydantic import ValidationError
from caniburn.schemas import BurnStatus, Coordinates, FireStatusRecord, FireWatchResult, Location


def window_record(**overrides):
	data = {
		"status": BurnStatus.RESTRICTED_BURN,
		"valid_from": datetime(2024, 7, 1, tzinfo=timezone.utc),
		"valid_to": datetime(2024, 9, 30, 23, 59, 59, tzinfo=timezone.utc),
		"jurisdiction": "City of Toronto",
	}
	data.update(overrides)
	return FireStatusRecord(**data)


class TestBurnStatus:
	"""Test cases for BurnStatus ordering."""
	
	def test_order_by_severity(self):
		assert BurnStatus.NO_BURN < BurnStatus.RESTRICTED_BURN < BurnStatus.OPEN_BURN
	
	def test_most_restrictive(self):
		assert BurnStatus.most_restrictive(BurnStatus.OPEN_BURN, BurnStatus.RESTRICTED_BURN) is BurnStatus.RESTRICTED_BURN
		assert BurnStatus.most_restrictive(BurnStatus.OPEN_BURN, BurnStatus.NO_BURN, BurnStatus.RESTRICTED_BURN) is BurnStatus.NO_BURN


class TestCoordinates:
	"""Test cases for the Coordinates model."""
	
	def test_cache_key_rounds_to_three_places(self):
		coordinates = Coordinates(latitude=45.12345, longitude=-75.98765)
		
		assert coordinates.cache_key() == "45.123,-75.988"
		assert coordinates.cache_key("_") == "45.123_-75.988"
	
	def test_strings_are_rejected(self):
		with pytest.raises(ValidationError):
			Coordinates(latitude="45.0", longitude="-75.0")
	
	def test_frozen(self):
		coordinates = Coordinates(latitude=45.0, longitude=-75.0)
		
		with pytest.raises(ValidationError):
			coordinates.latitude = 46.0


class TestLocation:
	"""Test cases for the Location model."""
	
	def test_region_prefers_province(self):
		assert Location(province="Ontario", state="Ontario", county="Toronto", country="Canada").region == "Ontario"
		assert Location(province="", state="Texas", county="Travis County", country="United States").region == "Texas"


class TestFireStatusRecord:
	"""Test cases for FireStatusRecord."""
	
	def test_is_current(self):
		record = window_record()
		
		assert record.is_current(datetime(2024, 8, 1, tzinfo=timezone.utc)) is True
		assert record.is_current(datetime(2024, 9, 30, 23, 59, 59, tzinfo=timezone.utc)) is True
		assert record.is_current(datetime(2024, 10, 1, tzinfo=timezone.utc)) is False
	
	def test_round_trip_through_dict(self):
		record = window_record(restrictions=["Permit required"])
		
		assert FireStatusRecord.from_dict(record.to_dict()) == record


class TestFireWatchResult:
	"""Test cases for FireWatchResult.from_status."""
	
	def test_from_status(self):
		record = window_record(restrictions=["No burning between 8 AM and 8 PM"])
		location = Location(province="Ontario", state="Ontario", county="Toronto", country="Canada")
		coordinates = Coordinates(latitude=43.6532, longitude=-79.3832)
		
		result = FireWatchResult.from_status(record, location, coordinates)
		
		assert result.status == BurnStatus.RESTRICTED_BURN
		assert result.valid_from == record.valid_from
		assert result.valid_to == record.valid_to
		assert result.jurisdiction == "City of Toronto"
		assert result.restrictions == ["No burning between 8 AM and 8 PM"]
		assert result.location == location
		assert result.coordinates == coordinates
