"""
Fire Status Aggregator: the provider fallback chain.

Providers are asked in priority order and the first record wins. Location
queries then fall back to a static table and a seasonal heuristic;
coordinate queries have no fallback.
"""
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Awaitable, Callable, Dict, List, Mapping, Optional, Sequence
from caniburn.exceptions import ExternalServiceFailure, FireStatusNotFound
from caniburn.providers.base import FireDataProvider
from caniburn.providers.cwfis_provider import CWFISProvider
from caniburn.providers.nasa_firms_provider import NASAFirmsProvider
from caniburn.schemas.fire_status import BurnStatus, FireStatusRecord
from caniburn.schemas.location import Coordinates, Location
from caniburn.utils.datetime_utils import local_now, month_window
from caniburn.utils.validation import ensure_valid_window

logger = logging.getLogger(__name__)

WINTER_MONTHS = (12, 1, 2, 3)
SUMMER_MONTHS = (6, 7, 8, 9)

STATIC_FIRE_STATUS: Dict[str, FireStatusRecord] = {
	"Ontario,Toronto": FireStatusRecord(
		status=BurnStatus.RESTRICTED_BURN,
		valid_from=datetime(2024, 7, 1, tzinfo=timezone.utc),
		valid_to=datetime(2024, 9, 30, 23, 59, 59, tzinfo=timezone.utc),
		jurisdiction="City of Toronto",
		restrictions=[
			"No burning between 8 AM and 8 PM",
			"Maximum pile size 2m x 2m",
		]
	),
	"British Columbia,Vancouver": FireStatusRecord(
		status=BurnStatus.NO_BURN,
		valid_from=datetime(2024, 6, 15, tzinfo=timezone.utc),
		valid_to=datetime(2024, 10, 15, 23, 59, 59, tzinfo=timezone.utc),
		jurisdiction="BC Wildfire Service",
		restrictions=[
			"Complete fire ban in effect",
			"All open fires prohibited",
		]
	),
	"Alberta,Calgary": FireStatusRecord(
		status=BurnStatus.OPEN_BURN,
		valid_from=datetime(2024, 5, 1, tzinfo=timezone.utc),
		valid_to=datetime(2024, 11, 30, 23, 59, 59, tzinfo=timezone.utc),
		jurisdiction="Alberta Agriculture and Forestry"
	),
	"New York,New York County": FireStatusRecord(
		status=BurnStatus.RESTRICTED_BURN,
		valid_from=datetime(2024, 4, 1, tzinfo=timezone.utc),
		valid_to=datetime(2024, 11, 30, 23, 59, 59, tzinfo=timezone.utc),
		jurisdiction="New York State Department of Environmental Conservation",
		restrictions=[
			"Permit required",
			"No burning during high wind conditions",
		]
	),
	"California,Los Angeles County": FireStatusRecord(
		status=BurnStatus.NO_BURN,
		valid_from=datetime(2024, 5, 1, tzinfo=timezone.utc),
		valid_to=datetime(2024, 12, 31, 23, 59, 59, tzinfo=timezone.utc),
		jurisdiction="California Department of Forestry and Fire Protection",
		restrictions=[
			"Red flag warning in effect",
			"All outdoor burning prohibited",
		]
	),
}


class Outcome(str, Enum):
	SUCCESS = "success"
	ABSENT = "absent"
	FAILURE = "failure"
	SKIPPED = "skipped"


@dataclass(frozen=True)
class ProviderOutcome:
	"""Result of asking one provider; the chain continues on anything but SUCCESS."""
	provider: str
	outcome: Outcome
	record: Optional[FireStatusRecord] = None
	error: Optional[str] = None


class FireStatusService:
	"""Owns the ordered provider list and the location fallbacks."""
	
	def __init__(
		self,
		providers: Optional[Sequence[FireDataProvider]] = None,
		static_table: Optional[Mapping[str, FireStatusRecord]] = None
	):
		# Priority order: satellite detections first, then CWFIS
		self.providers: List[FireDataProvider] = (
			list(providers) if providers is not None else [NASAFirmsProvider(), CWFISProvider()]
		)
		self.static_table: Mapping[str, FireStatusRecord] = (
			static_table if static_table is not None else STATIC_FIRE_STATUS
		)
	
	@staticmethod
	async def _attempt(provider: FireDataProvider, query: Callable[[], Awaitable[Optional[FireStatusRecord]]]) -> ProviderOutcome:
		"""Run one provider query, turning its answer or failure into a ProviderOutcome."""
		try:
			record = await query()
			if record is None:
				return ProviderOutcome(provider.name, Outcome.ABSENT)
			ensure_valid_window(record.valid_from, record.valid_to)
			return ProviderOutcome(provider.name, Outcome.SUCCESS, record=record)
		except Exception as e:
			return ProviderOutcome(provider.name, Outcome.FAILURE, error=str(e))
	
	async def location_outcomes(self, location: Location) -> List[ProviderOutcome]:
		"""
		Ask providers for a location in priority order, stopping at the first success.
		
		Returns:
			One ProviderOutcome per provider consulted (or skipped)
		"""
		outcomes = []
		for provider in self.providers:
			if not provider.supports_location(location):
				outcomes.append(ProviderOutcome(provider.name, Outcome.SKIPPED))
				continue
			outcome = await self._attempt(provider, lambda: provider.status_for_location(location))
			outcomes.append(outcome)
			if outcome.outcome is Outcome.FAILURE:
				logger.warning(f"Provider {provider.name} failed for location {location.region}, {location.county}: {outcome.error}")
			if outcome.outcome is Outcome.SUCCESS:
				break
		return outcomes
	
	async def coordinate_outcomes(self, coordinates: Coordinates) -> List[ProviderOutcome]:
		"""Coordinate counterpart of location_outcomes."""
		outcomes = []
		for provider in self.providers:
			if not provider.supports_coordinates(coordinates):
				outcomes.append(ProviderOutcome(provider.name, Outcome.SKIPPED))
				continue
			outcome = await self._attempt(provider, lambda: provider.status_for_coordinates(coordinates))
			outcomes.append(outcome)
			if outcome.outcome is Outcome.FAILURE:
				logger.warning(f"Provider {provider.name} failed for coordinates {coordinates.latitude},{coordinates.longitude}: {outcome.error}")
			if outcome.outcome is Outcome.SUCCESS:
				break
		return outcomes
	
	@staticmethod
	def _first_record(outcomes: List[ProviderOutcome]) -> Optional[FireStatusRecord]:
		for outcome in outcomes:
			if outcome.outcome is Outcome.SUCCESS:
				logger.info(f"Fire status answered by {outcome.provider}")
				return outcome.record
		return None
	
	async def status_for_location(self, location: Location) -> FireStatusRecord:
		"""
		Resolve fire status for a geocoded location.
		
		Order: providers, static table, seasonal heuristic.
		
		Raises:
			FireStatusNotFound: if nothing answers
			ExternalServiceFailure: on an unexpected fault in the chain itself
		"""
		try:
			record = self._first_record(await self.location_outcomes(location))
			if record is not None:
				return record
			
			record = self.static_table.get(f"{location.region},{location.county}")
			if record is not None:
				return record
			
			record = self.seasonal_status(location)
			if record is not None:
				return record
		except FireStatusNotFound:
			raise
		except Exception as e:
			logger.error(f"FireStatusService encountered an error: {str(e)}")
			raise ExternalServiceFailure("FireStatusService", e) from e
		
		raise FireStatusNotFound(f"{location.region}, {location.county}")
	
	async def status_for_coordinates(self, coordinates: Coordinates) -> Optional[FireStatusRecord]:
		"""
		Resolve fire status from coordinate-capable providers only.
		
		Returns:
			FireStatusRecord, or None if no provider answered
		"""
		try:
			return self._first_record(await self.coordinate_outcomes(coordinates))
		except Exception as e:
			raise ExternalServiceFailure("FireStatusService", e) from e
	
	@staticmethod
	def seasonal_status(location: Location, today: Optional[datetime] = None) -> Optional[FireStatusRecord]:
		"""
		Country- and month-based rule of thumb used when nothing else answers.
		
		Winter is December to March, summer June to September; other months
		and countries other than Canada and the United States have no rule.
		The result is valid for the whole current month, in the offset of
		`today`; a naive `today` is read as local time.
		"""
		today = today or local_now()
		if today.tzinfo is None:
			today = today.astimezone()
		month = today.month
		is_winter = month in WINTER_MONTHS
		is_summer = month in SUMMER_MONTHS
		valid_from, valid_to = month_window(today)
		
		if location.country == "Canada":
			if is_winter:
				return FireStatusRecord(
					status=BurnStatus.OPEN_BURN,
					valid_from=valid_from,
					valid_to=valid_to,
					jurisdiction="Provincial Fire Authority"
				)
			if is_summer:
				return FireStatusRecord(
					status=BurnStatus.RESTRICTED_BURN,
					valid_from=valid_from,
					valid_to=valid_to,
					jurisdiction="Provincial Fire Authority",
					restrictions=["Seasonal fire restrictions in effect"]
				)
		
		if location.country == "United States":
			if is_winter:
				return FireStatusRecord(
					status=BurnStatus.RESTRICTED_BURN,
					valid_from=valid_from,
					valid_to=valid_to,
					jurisdiction="State Fire Authority",
					restrictions=["Permit may be required"]
				)
			if is_summer:
				return FireStatusRecord(
					status=BurnStatus.NO_BURN,
					valid_from=valid_from,
					valid_to=valid_to,
					jurisdiction="State Fire Authority",
					restrictions=["High fire danger period"]
				)
		
		return None
	
	def list_provider_names(self) -> List[str]:
		return [provider.name for provider in self.providers]
	
	def coverage_of(self, provider_name: str) -> List[str]:
		for provider in self.providers:
			if provider.name == provider_name:
				return provider.coverage_regions()
		return []
	
	async def aclose(self) -> None:
		for provider in self.providers:
			await provider.aclose()
