from enum import IntEnum
from typing import List, Optional
from datetime import datetime
from caniburn.schemas.base import BaseSchema
from caniburn.schemas.location import Coordinates, Location

class BurnStatus(IntEnum):
	"""Burn status ordered by severity: lower values are more restrictive."""
	NO_BURN = 0
	RESTRICTED_BURN = 1
	OPEN_BURN = 2

	@classmethod
	def most_restrictive(cls, *statuses: "BurnStatus") -> "BurnStatus":
		return cls(min(statuses))

class FireStatusRecord(BaseSchema):
	"""
	Fire status produced by a provider, the static table or the seasonal rule.
	
	The validity window does not have to contain the current time; seeded
	static entries describe a season, provider answers cover the next 24 hours.
	"""
	status: BurnStatus
	valid_from: datetime
	valid_to: datetime
	jurisdiction: str
	restrictions: Optional[List[str]] = None

	def is_current(self, at: Optional[datetime] = None) -> bool:
		"""Whether `at` (default: now, in the window's timezone) falls inside the validity window."""
		moment = at or datetime.now(self.valid_from.tzinfo)
		return self.valid_from <= moment <= self.valid_to

class FireWatchResult(BaseSchema):
	"""Final answer for a coordinate: fire status merged with the geocoded location."""
	status: BurnStatus
	valid_from: datetime
	valid_to: datetime
	location: Location
	coordinates: Coordinates
	jurisdiction: Optional[str] = None
	restrictions: Optional[List[str]] = None

	@classmethod
	def from_status(cls, record: FireStatusRecord, location: Location, coordinates: Coordinates) -> "FireWatchResult":
		return cls(
			status=record.status,
			valid_from=record.valid_from,
			valid_to=record.valid_to,
			location=location,
			coordinates=coordinates,
			jurisdiction=record.jurisdiction,
			restrictions=record.restrictions
		)
