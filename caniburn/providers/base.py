"""
Capability interface shared by every fire data provider.
"""
from abc import ABC, abstractmethod
from typing import List, Optional
from caniburn.schemas.location import Coordinates, Location
from caniburn.schemas.fire_status import FireStatusRecord


class FireDataProvider(ABC):
	"""
	A source of fire status for a location or a coordinate.
	
	Implementations return None when a well-formed query yields no usable
	signal (unknown sub-region, no detections). They may raise
	ExternalServiceFailure for genuine I/O failures; the aggregator decides
	whether to continue with the next provider.
	"""
	
	@property
	@abstractmethod
	def name(self) -> str:
		"""Stable identifier used for provider selection and logging."""
	
	@abstractmethod
	def coverage_regions(self) -> List[str]:
		"""Human-readable coverage, for introspection only."""
	
	@abstractmethod
	def supports_location(self, location: Location) -> bool:
		...
	
	@abstractmethod
	def supports_coordinates(self, coordinates: Coordinates) -> bool:
		...
	
	@abstractmethod
	async def status_for_location(self, location: Location) -> Optional[FireStatusRecord]:
		...
	
	@abstractmethod
	async def status_for_coordinates(self, coordinates: Coordinates) -> Optional[FireStatusRecord]:
		...
	
	async def aclose(self) -> None:
		"""Release network resources held by the provider."""
		client = getattr(self, "client", None)
		if client is not None:
			await client.close()
