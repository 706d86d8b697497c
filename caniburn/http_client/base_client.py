from typing import Optional, Dict, Any
import httpx
from abc import ABC
from caniburn.config import settings

class BaseHTTPClient(ABC):
	"""
	Base async HTTP client shared by the upstream API clients.
	
	Each request is attempted once; non-2xx responses raise
	httpx.HTTPStatusError and callers decide what a failure means.
	"""
	
	def __init__(
		self,
		base_url: str,
		default_headers: Optional[Dict[str, str]] = None,
		timeout: Optional[float] = None
	):
		self.base_url = base_url.rstrip('/')
		self.default_headers = {"User-Agent": settings.user_agent, **(default_headers or {})}
		self.timeout = timeout if timeout is not None else settings.http_timeout_seconds
		self.client = httpx.AsyncClient(
			base_url=self.base_url,
			headers=self.default_headers,
			timeout=self.timeout
		)
	
	async def _request(
		self,
		endpoint: str,
		params: Optional[Dict[str, Any]] = None,
		headers: Optional[Dict[str, str]] = None
	) -> httpx.Response:
		merged_headers = {**self.default_headers, **(headers or {})}
		response = await self.client.get(endpoint, params=params, headers=merged_headers)
		response.raise_for_status()
		return response
	
	async def get(
		self,
		endpoint: str,
		params: Optional[Dict[str, Any]] = None,
		headers: Optional[Dict[str, str]] = None
	) -> Dict[str, Any]:
		"""
		Perform a GET request.
		
		Args:
			endpoint: API endpoint (relative to base_url)
			params: Query parameters
			headers: Additional headers (merged with default_headers)
		
		Returns:
			Response JSON as dictionary
		"""
		response = await self._request(endpoint, params=params, headers=headers)
		return response.json()
	
	async def get_text(
		self,
		endpoint: str,
		params: Optional[Dict[str, Any]] = None,
		headers: Optional[Dict[str, str]] = None
	) -> str:
		"""
		Perform a GET request for a plain-text (e.g. CSV) resource.
		
		Returns:
			Response body as text
		"""
		response = await self._request(endpoint, params=params, headers=headers)
		return response.text
	
	async def close(self):
		"""Close the HTTP client."""
		await self.client.aclose()
	
	async def __aenter__(self):
		return self
	
	async def __aexit__(self, exc_type, exc_val, exc_tb):
		await self.close()
