"""
Fire status from the Canadian Wildland Fire Information System (CWFIS):
active wildfires plus the Fire Weather Index of the nearest station.
"""
import logging
from datetime import datetime
from typing import List, Optional, Tuple
from caniburn.config import settings
from caniburn.http_client.cwfis_client import CWFISClient
from caniburn.providers.base import FireDataProvider
from caniburn.schemas.fire_data import ActiveFire, DangerLevel, FireDangerRating
from caniburn.schemas.fire_status import BurnStatus, FireStatusRecord
from caniburn.schemas.location import Coordinates, Location
from caniburn.utils.cwfis_parser import CWFISParser
from caniburn.utils.datetime_utils import utc_now, validity_window
from caniburn.utils.geo_utils import bounding_box, format_bbox, haversine_distance
from caniburn.utils.ttl_cache import TTLCache

logger = logging.getLogger(__name__)

JURISDICTION = "Canadian Wildland Fire Information System"

NEARBY_SEARCH_RADIUS_KM = 50
NEARBY_FIRE_DISTANCE_KM = 25
FIRE_WEATHER_RADIUS_M = 50000

# Provincial/territorial agency codes used by the activefires layer
AGENCY_CODES = {
	"Alberta": "ab",
	"British Columbia": "bc",
	"Manitoba": "mb",
	"New Brunswick": "nb",
	"Newfoundland and Labrador": "nl",
	"Northwest Territories": "nt",
	"Nova Scotia": "ns",
	"Nunavut": "nu",
	"Ontario": "on",
	"Prince Edward Island": "pe",
	"Quebec": "qc",
	"Saskatchewan": "sk",
	"Yukon": "yt",
}

KNOWN_PROVINCES = tuple(AGENCY_CODES)

# Approximate centres used to pick a representative fire weather station
PROVINCE_CENTROIDS = {
	"Alberta": (53.9333, -116.5765),
	"British Columbia": (53.7267, -127.6476),
	"Manitoba": (53.7609, -98.8139),
	"New Brunswick": (46.5653, -66.4619),
	"Newfoundland and Labrador": (53.1355, -57.6604),
	"Northwest Territories": (64.8255, -124.8457),
	"Nova Scotia": (44.682, -63.7443),
	"Nunavut": (70.2998, -83.1076),
	"Ontario": (51.2538, -85.3232),
	"Prince Edward Island": (46.5107, -63.4168),
	"Quebec": (53.9214, -73.2492),
	"Saskatchewan": (52.9399, -106.4509),
	"Yukon": (64.0685, -139.0686),
}

# (minimum FWI, level, index), checked top-down
FWI_THRESHOLDS: Tuple[Tuple[float, DangerLevel, int], ...] = (
	(30, "Extreme", 5),
	(17, "Very High", 4),
	(8, "High", 3),
	(3, "Moderate", 2),
)


def agency_code(province: str) -> str:
	"""Agency code for a province, falling back to its first two letters."""
	return AGENCY_CODES.get(province) or province.lower()[:2]


def province_centroid(province: str) -> Optional[Coordinates]:
	centroid = PROVINCE_CENTROIDS.get(province)
	if centroid is None:
		return None
	return Coordinates(latitude=centroid[0], longitude=centroid[1])


def classify_fwi(fwi: float) -> Tuple[DangerLevel, int]:
	"""
	Map a Fire Weather Index value to a danger level.
	
	Returns:
		Tuple of (level name, index 1-5)
	"""
	for minimum, level, index in FWI_THRESHOLDS:
		if fwi >= minimum:
			return level, index
	return "Low", 1


def status_for_danger_level(level: DangerLevel) -> Tuple[BurnStatus, Optional[List[str]]]:
	"""Burn status and restriction text for a danger level."""
	if level in ("Extreme", "Very High"):
		return BurnStatus.NO_BURN, [f"Fire danger rating: {level}", "No open burning permitted"]
	if level == "High":
		return BurnStatus.RESTRICTED_BURN, [f"Fire danger rating: {level}", "Restricted burning - permits required"]
	if level == "Moderate":
		return BurnStatus.RESTRICTED_BURN, ["Moderate fire danger", "Exercise caution when burning"]
	return BurnStatus.OPEN_BURN, None


class CWFISProvider(FireDataProvider):
	"""
	Canada-only provider.
	
	Every network or parse error is logged and turned into None here; this
	provider never raises to the aggregator.
	"""
	
	def __init__(self, client: Optional[CWFISClient] = None, cache: Optional[TTLCache] = None):
		self.client = client if client is not None else CWFISClient()
		self.cache = cache if cache is not None else TTLCache(settings.cache_ttl_seconds)
	
	@property
	def name(self) -> str:
		return JURISDICTION
	
	def coverage_regions(self) -> List[str]:
		return ["Canada"]
	
	def supports_location(self, location: Location) -> bool:
		return location.country == "Canada"
	
	def supports_coordinates(self, coordinates: Coordinates) -> bool:
		# Canada, approximate
		return 41.7 <= coordinates.latitude <= 83.1 and -141 <= coordinates.longitude <= -52.6
	
	async def status_for_location(self, location: Location) -> Optional[FireStatusRecord]:
		if not self.supports_location(location):
			return None
		
		if location.province not in KNOWN_PROVINCES:
			# Unknown sub-region: leave it to the static table and seasonal rules
			return None
		
		try:
			fires = await self.fires_for_province(location.province)
			rating = await self.danger_rating_for_province(location.province)
			return self.interpret_status(fires, rating, location.province)
		except Exception as e:
			logger.warning(f"CWFIS provider failed for location {location.province}: {str(e)}")
			return None
	
	async def status_for_coordinates(self, coordinates: Coordinates) -> Optional[FireStatusRecord]:
		if not self.supports_coordinates(coordinates):
			return None
		
		try:
			fires = await self.nearby_fires(coordinates)
			rating = await self.danger_rating_for_coordinates(coordinates)
			return self.interpret_status_for_coordinates(fires, rating, coordinates)
		except Exception as e:
			logger.warning(f"CWFIS provider failed for coordinates {coordinates.latitude},{coordinates.longitude}: {str(e)}")
			return None
	
	async def fires_for_province(self, province: str) -> List[ActiveFire]:
		cache_key = f"fires_{province}"
		cached = self.cache.read(cache_key)
		if cached is not None:
			return cached
		
		geojson = await self.client.fetch_active_fires_by_agency(agency_code(province))
		fires = CWFISParser.parse_active_fires(geojson)
		
		self.cache.create(cache_key, fires)
		return fires
	
	async def nearby_fires(self, coordinates: Coordinates, radius_km: float = NEARBY_SEARCH_RADIUS_KM) -> List[ActiveFire]:
		cache_key = f"nearby_{coordinates.cache_key('_')}"
		cached = self.cache.read(cache_key)
		if cached is not None:
			return cached
		
		bbox = format_bbox(bounding_box(coordinates, radius_km))
		geojson = await self.client.fetch_active_fires_in_bbox(bbox)
		fires = CWFISParser.parse_active_fires(geojson)
		
		self.cache.create(cache_key, fires)
		return fires
	
	async def danger_rating_for_province(self, province: str) -> Optional[FireDangerRating]:
		centroid = province_centroid(province)
		if centroid is None:
			return None
		return await self.danger_rating_for_coordinates(centroid)
	
	async def danger_rating_for_coordinates(self, coordinates: Coordinates) -> Optional[FireDangerRating]:
		"""
		Danger rating from the nearest fire weather station.
		
		Returns:
			FireDangerRating, or None if no station answered or the lookup failed
		"""
		cache_key = f"fire_weather_{coordinates.cache_key('_')}"
		cached = self.cache.read(cache_key)
		if cached is not None:
			return cached
		
		try:
			geojson = await self.client.fetch_fire_weather_near(
				coordinates.latitude, coordinates.longitude, FIRE_WEATHER_RADIUS_M
			)
			fire_weather = CWFISParser.parse_fire_weather(geojson)
		except Exception as e:
			logger.warning(f"Failed to fetch CWFIS fire weather data: {str(e)}")
			return None
		
		if fire_weather is None:
			return None
		
		rating = self.danger_rating(fire_weather.fwi)
		self.cache.create(cache_key, rating)
		return rating
	
	@staticmethod
	def danger_rating(fwi: float, now: Optional[datetime] = None) -> FireDangerRating:
		level, index = classify_fwi(fwi)
		valid_from, valid_to = validity_window(now or utc_now())
		return FireDangerRating(level=level, index=index, valid_from=valid_from, valid_to=valid_to)
	
	@staticmethod
	def interpret_status(
		fires: List[ActiveFire],
		rating: Optional[FireDangerRating],
		region: str,
		now: Optional[datetime] = None
	) -> Optional[FireStatusRecord]:
		"""
		Active fires in the region win over the danger rating.
		
		Returns:
			FireStatusRecord, or None when there are no active fires and no rating
		"""
		valid_from, valid_to = validity_window(now or utc_now())
		
		active_fires = [fire for fire in fires if fire.is_active]
		if active_fires:
			return FireStatusRecord(
				status=BurnStatus.NO_BURN,
				valid_from=valid_from,
				valid_to=valid_to,
				jurisdiction=JURISDICTION,
				restrictions=[
					f"{len(active_fires)} active wildfire(s) in {region}",
					"All burning prohibited during active fire conditions",
				]
			)
		
		if rating is None:
			return None
		
		status, restrictions = status_for_danger_level(rating.level)
		return FireStatusRecord(
			status=status,
			valid_from=valid_from,
			valid_to=valid_to,
			jurisdiction=JURISDICTION,
			restrictions=restrictions
		)
	
	@staticmethod
	def interpret_status_for_coordinates(
		fires: List[ActiveFire],
		rating: Optional[FireDangerRating],
		coordinates: Coordinates,
		now: Optional[datetime] = None
	) -> Optional[FireStatusRecord]:
		"""
		An active fire within 25 km wins; otherwise fall back to the danger rating.
		"""
		distances = [
			haversine_distance(coordinates, Coordinates(latitude=fire.lat, longitude=fire.lon))
			for fire in fires
			if fire.is_active
		]
		close_distances = [distance for distance in distances if distance < NEARBY_FIRE_DISTANCE_KM]
		
		if close_distances:
			valid_from, valid_to = validity_window(now or utc_now())
			return FireStatusRecord(
				status=BurnStatus.NO_BURN,
				valid_from=valid_from,
				valid_to=valid_to,
				jurisdiction=JURISDICTION,
				restrictions=[
					f"Active wildfire within {min(close_distances):.1f}km",
					"No burning permitted due to nearby fire activity",
				]
			)
		
		return CWFISProvider.interpret_status([], rating, "", now=now)
