"""
Fire status inferred from NASA FIRMS satellite hot-spot detections.
"""
import logging
from datetime import datetime, timedelta
from typing import List, Optional
from caniburn.config import settings
from caniburn.exceptions import ExternalServiceFailure
from caniburn.http_client.firms_client import FIRMSClient
from caniburn.providers.base import FireDataProvider
from caniburn.schemas.fire_data import FireDetection
from caniburn.schemas.fire_status import BurnStatus, FireStatusRecord
from caniburn.schemas.location import Coordinates, Location
from caniburn.utils.datetime_utils import utc_now, validity_window
from caniburn.utils.firms_csv_parser import FIRMSCSVParser
from caniburn.utils.geo_utils import bounding_box, format_bbox, haversine_distance
from caniburn.utils.ttl_cache import TTLCache

logger = logging.getLogger(__name__)

JURISDICTION = "NASA FIRMS Fire Detection"

PROXIMITY_RADIUS_KM = 10
LOOKBACK_DAYS = 7
RECENT_WINDOW = timedelta(hours=72)
NEARBY_DISTANCE_KM = 5
HIGH_CONFIDENCE = 80
HIGH_CONFIDENCE_COUNT_FOR_BAN = 3
RECENT_COUNT_FOR_RESTRICTION = 2


class NASAFirmsProvider(FireDataProvider):
	"""
	Point-based provider: only coordinate queries can be answered.
	
	Without a MAP_KEY the provider stays registered but answers nothing,
	so the chain moves on without a network call.
	"""
	
	def __init__(
		self,
		map_key: Optional[str] = None,
		client: Optional[FIRMSClient] = None,
		cache: Optional[TTLCache] = None
	):
		self.map_key = map_key if map_key is not None else (settings.nasa_firms_map_key or "")
		if not self.map_key.strip():
			logger.warning("NASA FIRMS MAP_KEY not provided. Fire detection will be limited.")
		self.client = client if client is not None else FIRMSClient()
		self.cache = cache if cache is not None else TTLCache(settings.cache_ttl_seconds)
	
	@property
	def name(self) -> str:
		return "NASA FIRMS"
	
	def coverage_regions(self) -> List[str]:
		return ["United States", "Canada", "Global"]
	
	def supports_location(self, location: Location) -> bool:
		return location.country in ("United States", "Canada")
	
	def supports_coordinates(self, coordinates: Coordinates) -> bool:
		# North America
		return 25 <= coordinates.latitude <= 85 and -170 <= coordinates.longitude <= -50
	
	async def status_for_location(self, location: Location) -> Optional[FireStatusRecord]:
		# Detections are point data; there is no regulatory status per region
		return None
	
	async def status_for_coordinates(self, coordinates: Coordinates) -> Optional[FireStatusRecord]:
		"""
		Infer a burn status from detections around a coordinate.
		
		Raises:
			ExternalServiceFailure: if the FIRMS feed cannot be fetched or read
		"""
		if not self.map_key.strip():
			return None
		
		try:
			detections = await self.nearby_detections(coordinates)
		except Exception as e:
			raise ExternalServiceFailure(self.name, e) from e
		
		return self.classify_detections(detections, coordinates)
	
	async def nearby_detections(self, coordinates: Coordinates) -> List[FireDetection]:
		"""
		Detections within PROXIMITY_RADIUS_KM over the last LOOKBACK_DAYS, cached per rounded coordinate.
		"""
		cache_key = coordinates.cache_key()
		cached = self.cache.read(cache_key)
		if cached is not None:
			return cached
		
		area = format_bbox(bounding_box(coordinates, PROXIMITY_RADIUS_KM))
		csv_data = await self.client.fetch_area_csv(self.map_key, area, LOOKBACK_DAYS)
		detections = FIRMSCSVParser.parse(csv_data)
		
		self.cache.create(cache_key, detections)
		return detections
	
	@staticmethod
	def classify_detections(
		detections: List[FireDetection],
		coordinates: Coordinates,
		now: Optional[datetime] = None
	) -> Optional[FireStatusRecord]:
		"""
		Turn detections into a burn status.
		
		Within the last 72 hours: any detection closer than 5 km, or at least
		three high-confidence detections, means NO_BURN; two or more recent
		detections mean RESTRICTED_BURN; otherwise there is no signal.
		"""
		if not detections:
			return None
		
		now = now or utc_now()
		recent = [d for d in detections if now - d.datetime < RECENT_WINDOW]
		high_confidence = [d for d in recent if d.confidence >= HIGH_CONFIDENCE]
		nearby = [
			d for d in recent
			if haversine_distance(coordinates, Coordinates(latitude=d.latitude, longitude=d.longitude)) < NEARBY_DISTANCE_KM
		]
		valid_from, valid_to = validity_window(now)
		
		if nearby or len(high_confidence) >= HIGH_CONFIDENCE_COUNT_FOR_BAN:
			logger.info(f"FIRMS: {len(nearby)} nearby and {len(high_confidence)} high-confidence detections at {coordinates.cache_key()}")
			return FireStatusRecord(
				status=BurnStatus.NO_BURN,
				valid_from=valid_from,
				valid_to=valid_to,
				jurisdiction=JURISDICTION,
				restrictions=[
					"Active fire detected in area",
					"No burning recommended due to fire activity",
				]
			)
		
		if len(recent) >= RECENT_COUNT_FOR_RESTRICTION:
			return FireStatusRecord(
				status=BurnStatus.RESTRICTED_BURN,
				valid_from=valid_from,
				valid_to=valid_to,
				jurisdiction=JURISDICTION,
				restrictions=[
					"Recent fire activity detected",
					"Exercise extreme caution",
				]
			)
		
		return None
