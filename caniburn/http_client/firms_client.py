"""
HTTP client for the NASA FIRMS area API.
"""
import logging
import httpx
from typing import Optional
from caniburn.http_client.base_client import BaseHTTPClient
from caniburn.config import settings

logger = logging.getLogger(__name__)


class FIRMSRateLimitError(Exception):
	"""Raised when FIRMS answers 429 Too Many Requests."""


class FIRMSClient(BaseHTTPClient):
	"""Client for fetching hot-spot detections as CSV from NASA FIRMS."""
	
	def __init__(self, base_url: Optional[str] = None, source: Optional[str] = None):
		super().__init__(base_url or settings.nasa_firms_base_url)
		self.source = source or settings.nasa_firms_source
	
	async def fetch_area_csv(self, map_key: str, area: str, days: int) -> str:
		"""
		Fetch detections inside a bounding box.
		
		Args:
			map_key: FIRMS MAP_KEY credential
			area: "min_lon,min_lat,max_lon,max_lat"
			days: Lookback window in days
		
		Returns:
			Raw CSV text
		
		Raises:
			FIRMSRateLimitError: on HTTP 429
			httpx.HTTPStatusError: on any other non-2xx response
		"""
		try:
			csv_data = await self.get_text(f"/{map_key}/{self.source}/{area}/{days}")
		except httpx.HTTPStatusError as e:
			if e.response.status_code == 429:
				logger.warning("NASA FIRMS rate limit exceeded")
				raise FIRMSRateLimitError("NASA FIRMS rate limit exceeded") from e
			logger.warning(f"NASA FIRMS API error: {e.response.status_code} {e.response.reason_phrase}")
			raise
		
		logger.info(f"Fetched FIRMS detections for area {area} over {days} days")
		return csv_data
