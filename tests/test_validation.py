"""
Unit tests for coordinate and date validation helpers.
"""
import math
import pytest
from datetime import datetime, timedelta, timezone
from caniburn.exceptions import InvalidCoordinates, ValidationFailure
from caniburn.schemas.location import Coordinates
from caniburn.utils.validation import (
	validate_coordinates,
	to_coordinates,
	is_valid_date,
	is_date_in_range,
	ensure_valid_window,
)


class TestValidateCoordinates:
	"""Test cases for validate_coordinates."""
	
	def test_valid_coordinates(self):
		"""Test that ordinary coordinates pass."""
		validate_coordinates(Coordinates(latitude=43.6532, longitude=-79.3832))
		validate_coordinates(Coordinates(latitude=0, longitude=0))
	
	def test_boundary_coordinates(self):
		"""Test that the exact range limits are accepted."""
		for latitude in (-90, 90):
			for longitude in (-180, 180):
				validate_coordinates(Coordinates(latitude=latitude, longitude=longitude))
	
	def test_latitude_out_of_range(self):
		"""Test latitude beyond +/-90."""
		for latitude in (90.0001, -90.0001, 91, -200):
			with pytest.raises(InvalidCoordinates):
				validate_coordinates(Coordinates(latitude=latitude, longitude=0))
	
	def test_longitude_out_of_range(self):
		"""Test longitude beyond +/-180."""
		for longitude in (180.0001, -180.0001, 181, -360):
			with pytest.raises(InvalidCoordinates):
				validate_coordinates(Coordinates(latitude=0, longitude=longitude))
	
	def test_nan_values(self):
		"""Test that NaN is rejected for either field."""
		with pytest.raises(InvalidCoordinates):
			validate_coordinates(Coordinates(latitude=math.nan, longitude=0))
		with pytest.raises(InvalidCoordinates):
			validate_coordinates(Coordinates(latitude=0, longitude=math.nan))
	
	def test_infinite_values(self):
		"""Test that infinities are rejected."""
		with pytest.raises(InvalidCoordinates):
			validate_coordinates(Coordinates(latitude=math.inf, longitude=0))
		with pytest.raises(InvalidCoordinates):
			validate_coordinates(Coordinates(latitude=0, longitude=-math.inf))
	
	def test_error_carries_both_values(self):
		"""Test that the error reports latitude and longitude together."""
		with pytest.raises(InvalidCoordinates) as exc_info:
			validate_coordinates(Coordinates(latitude=95, longitude=-75))
		
		assert exc_info.value.latitude == 95
		assert exc_info.value.longitude == -75
		assert "latitude 95" in exc_info.value.message
		assert "longitude -75" in exc_info.value.message
		assert exc_info.value.code == "INVALID_COORDINATES"
		assert exc_info.value.status_code == 400


class TestToCoordinates:
	"""Test cases for to_coordinates."""
	
	def test_model_is_returned_unchanged(self):
		coordinates = Coordinates(latitude=1.0, longitude=2.0)
		assert to_coordinates(coordinates) is coordinates
	
	def test_mapping_is_converted(self):
		result = to_coordinates({"latitude": 49.2827, "longitude": -123.1207})
		assert result == Coordinates(latitude=49.2827, longitude=-123.1207)
	
	def test_non_numeric_values(self):
		"""Test that strings and booleans raise InvalidCoordinates, not a pydantic error."""
		for value in ({"latitude": "abc", "longitude": 0}, {"latitude": 0, "longitude": "45"}, {"latitude": True, "longitude": 0}):
			with pytest.raises(InvalidCoordinates):
				to_coordinates(value)
	
	def test_missing_values(self):
		with pytest.raises(InvalidCoordinates):
			to_coordinates({"latitude": 45.0})


class TestDateHelpers:
	"""Test cases for the date helpers."""
	
	def test_is_valid_date(self):
		assert is_valid_date(datetime.now(timezone.utc)) is True
		assert is_valid_date("2024-01-01") is False
		assert is_valid_date(None) is False
	
	def test_is_date_in_range_is_inclusive(self):
		start = datetime(2024, 7, 1, tzinfo=timezone.utc)
		end = datetime(2024, 9, 30, tzinfo=timezone.utc)
		
		assert is_date_in_range(start, start, end) is True
		assert is_date_in_range(end, start, end) is True
		assert is_date_in_range(datetime(2024, 8, 1, tzinfo=timezone.utc), start, end) is True
		assert is_date_in_range(datetime(2024, 10, 1, tzinfo=timezone.utc), start, end) is False
	
	def test_ensure_valid_window(self):
		start = datetime(2024, 7, 1, tzinfo=timezone.utc)
		ensure_valid_window(start, start)
		ensure_valid_window(start, start + timedelta(hours=24))
	
	def test_ensure_valid_window_inverted(self):
		start = datetime(2024, 7, 1, tzinfo=timezone.utc)
		with pytest.raises(ValidationFailure) as exc_info:
			ensure_valid_window(start, start - timedelta(seconds=1))
		
		assert exc_info.value.field == "valid_to"
		assert exc_info.value.code == "VALIDATION_ERROR"
	
	def test_ensure_valid_window_not_a_date(self):
		with pytest.raises(ValidationFailure):
			ensure_valid_window("yesterday", datetime(2024, 7, 1, tzinfo=timezone.utc))
