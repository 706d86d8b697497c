from typing import Any, Dict, Optional
from caniburn.http_client.base_client import BaseHTTPClient
from caniburn.config import settings

class NominatimClient(BaseHTTPClient):
	"""
	OpenStreetMap Nominatim client.
	All requests include the User-Agent header required by the usage policy.
	"""
	
	def __init__(self, base_url: Optional[str] = None):
		super().__init__(base_url or settings.nominatim_base_url)
	
	async def reverse(self, latitude: float, longitude: float) -> Dict[str, Any]:
		"""
		Reverse geocode a coordinate with address details.
		
		Returns:
			Nominatim response with "address" and "display_name"
		"""
		params = {
			"lat": str(latitude),
			"lon": str(longitude),
			"format": "json",
			"addressdetails": "1",
			"zoom": "18",
		}
		return await self.get("/reverse", params=params)
