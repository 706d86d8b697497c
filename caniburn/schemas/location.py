from typing import Literal
from pydantic import ConfigDict
from caniburn.schemas.base import BaseSchema

class Coordinates(BaseSchema):
	"""
	GPS coordinate pair.
	
	Strict mode keeps strings and booleans out; range and NaN checks are the
	job of validate_coordinates so the offending values can be reported.
	"""
	model_config = ConfigDict(frozen=True, strict=True)

	latitude: float
	longitude: float

	def cache_key(self, separator: str = ",") -> str:
		"""Coordinate rounded to 3 decimal places, used to key provider caches."""
		return f"{self.latitude:.3f}{separator}{self.longitude:.3f}"

class Location(BaseSchema):
	"""
	Normalized reverse-geocoded location.
	
	province and state are near-duplicates: Canadian addresses carry a province,
	US addresses a state. Both are filled so callers can use either name.
	"""
	province: str
	state: str
	county: str
	country: str

	@property
	def region(self) -> str:
		"""Province or state, whichever is set."""
		return self.province or self.state

class ReverseGeocodeResult(BaseSchema):
	location: Location
	accuracy: Literal["high", "medium", "low"] = "high"
