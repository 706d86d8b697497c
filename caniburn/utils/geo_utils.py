"""
Distance and bounding-box helpers shared by the fire data providers.
"""
import math
import logging
from typing import Any, Dict, List, Tuple
from caniburn.schemas.location import Coordinates

logger = logging.getLogger(__name__)

EARTH_RADIUS_KM = 6371.0
# Approximate length of one degree of latitude
KM_PER_DEGREE = 111.0


def haversine_distance(origin: Coordinates, destination: Coordinates) -> float:
	"""
	Great-circle distance between two coordinates.
	
	Returns:
		Distance in kilometres
	"""
	d_lat = math.radians(destination.latitude - origin.latitude)
	d_lon = math.radians(destination.longitude - origin.longitude)
	a = (
		math.sin(d_lat / 2) ** 2
		+ math.cos(math.radians(origin.latitude))
		* math.cos(math.radians(destination.latitude))
		* math.sin(d_lon / 2) ** 2
	)
	c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
	return EARTH_RADIUS_KM * c


def bounding_box(center: Coordinates, radius_km: float) -> Tuple[float, float, float, float]:
	"""
	Build a (min_lon, min_lat, max_lon, max_lat) box around a point.
	
	The longitude offset is widened by 1/cos(latitude) so the box keeps
	roughly the same ground width away from the equator.
	"""
	lat_offset = radius_km / KM_PER_DEGREE
	lon_offset = radius_km / (KM_PER_DEGREE * math.cos(math.radians(center.latitude)))
	return (
		center.longitude - lon_offset,
		center.latitude - lat_offset,
		center.longitude + lon_offset,
		center.latitude + lat_offset,
	)


def format_bbox(box: Tuple[float, float, float, float]) -> str:
	"""Comma-joined bbox as expected by FIRMS area queries and WFS bbox params."""
	return ",".join(str(value) for value in box)


def ring_centroid(ring: List[List[float]]) -> Coordinates:
	"""Arithmetic mean of a GeoJSON ring's [lon, lat] vertices."""
	lat_sum = sum(vertex[1] for vertex in ring)
	lon_sum = sum(vertex[0] for vertex in ring)
	return Coordinates(latitude=lat_sum / len(ring), longitude=lon_sum / len(ring))


def geometry_location(geometry: Dict[str, Any]) -> Coordinates:
	"""
	Representative point for a GeoJSON geometry.
	
	Polygons use the mean of their outer ring, points use the point itself.
	Anything else, including a missing or malformed geometry, degenerates
	to (0, 0).
	"""
	geometry = geometry or {}
	geometry_type = geometry.get("type")
	coordinates = geometry.get("coordinates")

	try:
		if geometry_type == "Polygon" and coordinates and coordinates[0]:
			return ring_centroid(coordinates[0])

		if geometry_type == "Point" and coordinates:
			return Coordinates(latitude=float(coordinates[1]), longitude=float(coordinates[0]))
	except (TypeError, ValueError, IndexError) as e:
		logger.debug(f"Unreadable {geometry_type} geometry: {str(e)}")

	return Coordinates(latitude=0.0, longitude=0.0)
