"""
Top-level entry point: "can I burn at this coordinate?"
"""
import logging
from typing import Any, Mapping, Optional, Union
from caniburn.schemas.fire_status import FireWatchResult
from caniburn.schemas.location import Coordinates
from caniburn.services.fire_status_service import FireStatusService
from caniburn.services.location_service import LocationService
from caniburn.utils.validation import to_coordinates, validate_coordinates

logger = logging.getLogger(__name__)


class BurnStatusService:
	"""Validates input, resolves fire status and merges it with the geocoded location."""
	
	def __init__(
		self,
		location_service: Optional[LocationService] = None,
		fire_status_service: Optional[FireStatusService] = None
	):
		self.location_service = location_service if location_service is not None else LocationService()
		self.fire_status_service = fire_status_service if fire_status_service is not None else FireStatusService()
	
	async def evaluate(self, coordinates: Union[Coordinates, Mapping[str, Any]]) -> FireWatchResult:
		"""
		Answer whether burning is allowed at a coordinate.
		
		The coordinate lookup is preferred since satellite data is point-based;
		the geocoded location is only used for status when no provider answers
		for the coordinate.
		
		Args:
			coordinates: Coordinates model or {"latitude": ..., "longitude": ...}
		
		Returns:
			FireWatchResult
		
		Raises:
			InvalidCoordinates: before any network call, for bad input
			LocationNotFound, FireStatusNotFound, ExternalServiceFailure: from the collaborators
		"""
		coordinates = to_coordinates(coordinates)
		validate_coordinates(coordinates)
		
		record = await self.fire_status_service.status_for_coordinates(coordinates)
		
		if record is None:
			geocode_result = await self.location_service.reverse_geocode(coordinates)
			record = await self.fire_status_service.status_for_location(geocode_result.location)
		
		# Location for the response is always resolved afresh
		geocode_result = await self.location_service.reverse_geocode(coordinates)
		
		logger.info(
			f"Burn status {record.status.name} for {coordinates.latitude},{coordinates.longitude} "
			f"({geocode_result.location.region}, {geocode_result.location.country}) from {record.jurisdiction}"
		)
		return FireWatchResult.from_status(record, geocode_result.location, coordinates)
	
	async def aclose(self) -> None:
		await self.location_service.aclose()
		await self.fire_status_service.aclose()
	
	async def __aenter__(self):
		return self
	
	async def __aexit__(self, exc_type, exc_val, exc_tb):
		await self.aclose()
