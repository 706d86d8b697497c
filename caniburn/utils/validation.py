import math
from typing import Any, Mapping, Union
from datetime import datetime
from pydantic import ValidationError as PydanticValidationError
from caniburn.exceptions import InvalidCoordinates, ValidationFailure
from caniburn.schemas.location import Coordinates


def _is_number(value: Any) -> bool:
	return isinstance(value, (int, float)) and not isinstance(value, bool) and not math.isnan(value)


def validate_coordinates(coordinates: Coordinates) -> None:
	"""
	Reject non-numeric, NaN, infinite or out-of-range coordinates.
	
	Raises:
		InvalidCoordinates: carrying both values, whichever one is wrong
	"""
	latitude = coordinates.latitude
	longitude = coordinates.longitude

	if not _is_number(latitude) or not _is_number(longitude):
		raise InvalidCoordinates(latitude, longitude)

	if latitude < -90 or latitude > 90:
		raise InvalidCoordinates(latitude, longitude)

	if longitude < -180 or longitude > 180:
		raise InvalidCoordinates(latitude, longitude)


def to_coordinates(value: Union[Coordinates, Mapping[str, Any]]) -> Coordinates:
	"""
	Accept a Coordinates model or a {"latitude", "longitude"} mapping.
	
	Values the model refuses (strings, booleans, missing keys) are reported
	as InvalidCoordinates rather than a pydantic error.
	"""
	if isinstance(value, Coordinates):
		return value

	latitude = value.get("latitude") if isinstance(value, Mapping) else None
	longitude = value.get("longitude") if isinstance(value, Mapping) else None
	if isinstance(latitude, bool) or isinstance(longitude, bool):
		raise InvalidCoordinates(latitude, longitude)
	try:
		return Coordinates(latitude=latitude, longitude=longitude)
	except PydanticValidationError:
		raise InvalidCoordinates(latitude, longitude) from None


def is_valid_date(value: Any) -> bool:
	return isinstance(value, datetime)


def is_date_in_range(date: datetime, valid_from: datetime, valid_to: datetime) -> bool:
	"""Inclusive range check."""
	return valid_from <= date <= valid_to


def ensure_valid_window(valid_from: datetime, valid_to: datetime) -> None:
	"""
	Raises:
		ValidationFailure: when either bound is not a datetime or the window is inverted
	"""
	if not is_valid_date(valid_from):
		raise ValidationFailure("valid_from", valid_from, "must be a datetime")
	if not is_valid_date(valid_to):
		raise ValidationFailure("valid_to", valid_to, "must be a datetime")
	if valid_to < valid_from:
		raise ValidationFailure("valid_to", valid_to.isoformat(), f"must not be earlier than valid_from {valid_from.isoformat()}")
