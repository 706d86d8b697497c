"""
Reverse geocoding of coordinates into a normalized Location via Nominatim.
"""
import logging
from typing import Any, Dict, Optional
from caniburn.exceptions import ExternalServiceFailure, InvalidCoordinates, LocationNotFound
from caniburn.http_client.nominatim_client import NominatimClient
from caniburn.schemas.location import Coordinates, Location, ReverseGeocodeResult
from caniburn.utils.validation import validate_coordinates

logger = logging.getLogger(__name__)

COUNTRY_NAMES = {
	"ca": "Canada",
	"us": "United States",
}

# Display-name segments that look like a county-level division
COUNTY_MARKERS = ("county", "regional municipality", "district")


class LocationService:
	"""Geocoding collaborator used by the burn status orchestrator."""
	
	def __init__(self, client: Optional[NominatimClient] = None):
		self.client = client if client is not None else NominatimClient()
	
	async def reverse_geocode(self, coordinates: Coordinates) -> ReverseGeocodeResult:
		"""
		Resolve coordinates to a province/state, county and country.
		
		Raises:
			InvalidCoordinates: if the coordinates are out of range
			LocationNotFound: if no country or province/state could be determined
			ExternalServiceFailure: for any other geocoder failure
		"""
		try:
			validate_coordinates(coordinates)
			data = await self.client.reverse(coordinates.latitude, coordinates.longitude)
			
			if not data.get("address"):
				raise LocationNotFound(coordinates.latitude, coordinates.longitude)
			
			location = self.parse_response(data, coordinates)
			return ReverseGeocodeResult(location=location, accuracy="high")
		except (LocationNotFound, InvalidCoordinates):
			raise
		except Exception as e:
			logger.error(f"Reverse geocoding failed for {coordinates.latitude},{coordinates.longitude}: {str(e)}")
			raise ExternalServiceFailure("LocationService", e) from e
	
	@staticmethod
	def parse_response(data: Dict[str, Any], coordinates: Coordinates) -> Location:
		"""
		Normalize a Nominatim response.
		
		Args:
			data: Nominatim JSON with "address" and "display_name"
			coordinates: Queried coordinates, reported if the location is unresolved
		
		Returns:
			Location
		"""
		address = data.get("address") or {}
		
		country = COUNTRY_NAMES.get(address.get("country_code")) or address.get("country")
		province = address.get("province") or address.get("state")
		state = address.get("state") or address.get("province")
		
		if not country or not province:
			raise LocationNotFound(coordinates.latitude, coordinates.longitude)
		
		county = (
			address.get("county")
			or address.get("state_district")
			or LocationService.county_from_display_name(data.get("display_name") or "")
			or "Unknown County"
		)
		
		return Location(province=province, state=state, county=county, country=country)
	
	@staticmethod
	def county_from_display_name(display_name: str) -> Optional[str]:
		"""First comma-separated segment that names a county-level division."""
		for part in display_name.split(", "):
			lowered = part.lower()
			if any(marker in lowered for marker in COUNTY_MARKERS):
				return part.strip()
		return None
	
	async def aclose(self) -> None:
		await self.client.close()
