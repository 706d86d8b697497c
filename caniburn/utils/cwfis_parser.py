"""
Parser for CWFIS GeoServer (WFS) feature collections.
"""
from typing import Any, Dict, List, Optional
from caniburn.schemas.fire_data import ActiveFire, FireWeatherIndex
from caniburn.utils.geo_utils import geometry_location
import logging

logger = logging.getLogger(__name__)

FIRE_WEATHER_CODES = ("fwi", "ffmc", "dmc", "dc", "isi", "bui", "dsr")


class CWFISParser:
	"""Parser for extracting active fires and fire weather from CWFIS GeoJSON."""
	
	@staticmethod
	def parse_active_fire(feature: Dict[str, Any]) -> ActiveFire:
		"""
		Parse one active fire feature.
		
		The fire's position comes from its lat/lon properties when present,
		otherwise from the feature geometry.
		
		Args:
			feature: Complete GeoJSON feature dictionary
		
		Returns:
			ActiveFire object
		"""
		properties = feature.get("properties") or {}
		lat = properties.get("lat")
		lon = properties.get("lon")
		if not lat or not lon:
			position = geometry_location(feature.get("geometry"))
			lat = lat or position.latitude
			lon = lon or position.longitude
		
		return ActiveFire(
			firename=properties.get("firename") or "",
			lat=lat,
			lon=lon,
			startdate=properties.get("startdate") or "",
			hectares=properties.get("hectares") or 0,
			stage_of_control=properties.get("stage_of_control") or "",
			agency=properties.get("agency") or "",
			response_type=properties.get("response_type") or "",
		)
	
	@staticmethod
	def parse_active_fires(geojson: Dict[str, Any]) -> List[ActiveFire]:
		"""
		Parse an active fires feature collection.
		
		Features whose properties cannot be read are skipped individually.
		
		Returns:
			List of ActiveFire objects, empty when the collection has no features
		"""
		features = geojson.get("features") or []
		fires = []
		for feature in features:
			try:
				fires.append(CWFISParser.parse_active_fire(feature))
			except (TypeError, ValueError, AttributeError) as e:
				logger.warning(f"Skipping malformed CWFIS fire feature: {str(e)}")
		return fires
	
	@staticmethod
	def parse_fire_weather(geojson: Dict[str, Any]) -> Optional[FireWeatherIndex]:
		"""
		Parse the first station of a fire weather feature collection.
		
		Args:
			geojson: Feature collection from the firewx_stns_current layer
		
		Returns:
			FireWeatherIndex, or None if no station was returned
		"""
		features = geojson.get("features") or []
		if not features:
			return None
		
		properties = features[0].get("properties") or {}
		codes = {code: properties.get(code) or 0 for code in FIRE_WEATHER_CODES}
		
		return FireWeatherIndex(
			**codes,
			date=properties.get("rep_date") or "",
			station=properties.get("name") or "Unknown",
			wmo=properties.get("wmo"),
			agency=properties.get("agency") or "",
			prov=properties.get("prov") or "",
			lat=properties.get("lat") or 0,
			lon=properties.get("lon") or 0,
		)
