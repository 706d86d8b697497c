"""
Datetime utility functions.
"""
import calendar
from typing import Optional, Tuple
from datetime import datetime, timezone, timedelta
import logging

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
	"""Current time, timezone-aware in UTC."""
	return datetime.now(timezone.utc)


def local_now() -> datetime:
	"""Current time on the local system clock, timezone-aware in the local offset."""
	return datetime.now().astimezone()


def validity_window(start: datetime, hours: int = 24) -> Tuple[datetime, datetime]:
	"""(start, start + hours) window used for provider answers."""
	return start, start + timedelta(hours=hours)


def month_window(moment: datetime) -> Tuple[datetime, datetime]:
	"""
	First instant and last second of the calendar month containing `moment`.
	
	Args:
		moment: Any datetime; its tzinfo is preserved
	
	Returns:
		Tuple of (month start, month end)
	"""
	last_day = calendar.monthrange(moment.year, moment.month)[1]
	start = moment.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
	end = moment.replace(day=last_day, hour=23, minute=59, second=59, microsecond=0)
	return start, end


def parse_acquisition_datetime(acq_date: str, acq_time: Optional[str]) -> datetime:
	"""
	Combine a FIRMS acquisition date and HHMM time into a UTC datetime.
	
	Handles formats like:
	- ("2024-01-15", "1230") -> 2024-01-15T12:30:00Z
	- ("2024-01-15", "45")   -> 2024-01-15T00:00:00Z (time not in HHMM form)
	
	Raises:
		ValueError: if the date or time cannot be parsed
	"""
	acq_time = (acq_time or "").strip()
	if len(acq_time) == 4:
		hour, minute = int(acq_time[:2]), int(acq_time[2:])
	else:
		hour, minute = 0, 0
	day = datetime.strptime(acq_date.strip(), "%Y-%m-%d")
	return day.replace(hour=hour, minute=minute, tzinfo=timezone.utc)
