import os
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

class Settings:
	# NASA FIRMS configuration
	nasa_firms_map_key: Optional[str] = os.getenv("NASA_FIRMS_MAP_KEY", None)
	nasa_firms_base_url: str = os.getenv("NASA_FIRMS_BASE_URL", "https://firms.modaps.eosdis.nasa.gov/api/area/csv")
	nasa_firms_source: str = os.getenv("NASA_FIRMS_SOURCE", "VIIRS_SNPP_NRT")

	# CWFIS GeoServer configuration
	cwfis_base_url: str = os.getenv("CWFIS_BASE_URL", "https://cwfis.cfs.nrcan.gc.ca/geoserver")

	# Nominatim reverse geocoding configuration
	nominatim_base_url: str = os.getenv("NOMINATIM_BASE_URL", "https://nominatim.openstreetmap.org")

	user_agent_name: str = os.getenv("USER_AGENT_NAME", "CanIBurnService")
	user_agent_version: str = os.getenv("USER_AGENT_VERSION", "1.0")

	http_timeout_seconds: float = float(os.getenv("HTTP_TIMEOUT_SECONDS", "30"))

	# Provider response caches (default: 30 minutes)
	cache_ttl_minutes: int = int(os.getenv("CACHE_TTL_MINUTES", "30"))

	log_level: str = os.getenv("LOG_LEVEL", "INFO")

	@property
	def user_agent(self) -> str:
		"""User-Agent header sent to every upstream API."""
		return f"{self.user_agent_name}/{self.user_agent_version}"

	@property
	def cache_ttl_seconds(self) -> int:
		return self.cache_ttl_minutes * 60

settings = Settings()
