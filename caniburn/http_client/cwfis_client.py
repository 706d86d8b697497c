"""
HTTP client for the Canadian Wildland Fire Information System GeoServer.
"""
import logging
from typing import Any, Dict, Optional
from caniburn.http_client.base_client import BaseHTTPClient
from caniburn.config import settings

logger = logging.getLogger(__name__)

ACTIVE_FIRES_LAYER = "public:activefires_current"
FIRE_WEATHER_STATIONS_LAYER = "public:firewx_stns_current"
WFS_ENDPOINT = "/ows"


class CWFISClient(BaseHTTPClient):
	"""Client for WFS GetFeature queries against CWFIS."""
	
	def __init__(self, base_url: Optional[str] = None):
		super().__init__(base_url or settings.cwfis_base_url)
	
	@staticmethod
	def build_params(type_name: str, **filters: str) -> Dict[str, str]:
		"""
		Build WFS 2.0.0 GetFeature parameters returning GeoJSON.
		
		Args:
			type_name: Layer name
			filters: Extra parameters such as CQL_FILTER or bbox
		"""
		return {
			"service": "WFS",
			"version": "2.0.0",
			"request": "GetFeature",
			"typeName": type_name,
			"outputFormat": "application/json",
			**filters,
		}
	
	async def fetch_active_fires_by_agency(self, agency_code: str) -> Dict[str, Any]:
		"""
		Fetch active fires reported by a provincial agency.
		
		Returns:
			GeoJSON FeatureCollection
		"""
		params = self.build_params(ACTIVE_FIRES_LAYER, CQL_FILTER=f"agency = '{agency_code}'")
		data = await self.get(WFS_ENDPOINT, params=params)
		logger.info(f"Fetched {len(data.get('features') or [])} active fires for agency {agency_code}")
		return data
	
	async def fetch_active_fires_in_bbox(self, bbox: str) -> Dict[str, Any]:
		"""
		Fetch active fires intersecting a "min_lon,min_lat,max_lon,max_lat" box.
		
		Returns:
			GeoJSON FeatureCollection
		"""
		params = self.build_params(ACTIVE_FIRES_LAYER, bbox=bbox)
		data = await self.get(WFS_ENDPOINT, params=params)
		logger.info(f"Fetched {len(data.get('features') or [])} active fires in bbox {bbox}")
		return data
	
	async def fetch_fire_weather_near(self, latitude: float, longitude: float, radius_m: int) -> Dict[str, Any]:
		"""
		Fetch fire weather stations within radius_m metres of a point.
		
		Returns:
			GeoJSON FeatureCollection
		"""
		cql_filter = f"DWITHIN(the_geom, POINT({longitude} {latitude}), {radius_m}, meters)"
		params = self.build_params(FIRE_WEATHER_STATIONS_LAYER, CQL_FILTER=cql_filter)
		return await self.get(WFS_ENDPOINT, params=params)
