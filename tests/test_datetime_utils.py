"""
Unit tests for datetime_utils.
"""
import pytest
from datetime import datetime, timezone, timedelta
from caniburn.utils.datetime_utils import (
	local_now,
	month_window,
	parse_acquisition_datetime,
	utc_now,
	validity_window,
)


class TestParseAcquisitionDatetime:
	"""Test cases for parse_acquisition_datetime."""
	
	def test_hhmm_time(self):
		result = parse_acquisition_datetime("2024-01-15", "1230")
		assert result == datetime(2024, 1, 15, 12, 30, tzinfo=timezone.utc)
	
	def test_leading_zero_time(self):
		result = parse_acquisition_datetime("2024-07-04", "0405")
		assert result == datetime(2024, 7, 4, 4, 5, tzinfo=timezone.utc)
	
	def test_short_time_falls_back_to_midnight(self):
		"""Times not in HHMM form are read as midnight."""
		for acq_time in ("45", "", None, "12345"):
			result = parse_acquisition_datetime("2024-01-15", acq_time)
			assert result == datetime(2024, 1, 15, tzinfo=timezone.utc)
	
	def test_invalid_date(self):
		with pytest.raises(ValueError):
			parse_acquisition_datetime("not-a-date", "1230")
	
	def test_invalid_time(self):
		with pytest.raises(ValueError):
			parse_acquisition_datetime("2024-01-15", "12ab")


class TestMonthWindow:
	"""Test cases for month_window."""
	
	def test_january(self):
		start, end = month_window(datetime(2024, 1, 15, 10, 30))
		assert start == datetime(2024, 1, 1)
		assert end == datetime(2024, 1, 31, 23, 59, 59)
	
	def test_leap_february(self):
		start, end = month_window(datetime(2024, 2, 10))
		assert end == datetime(2024, 2, 29, 23, 59, 59)
	
	def test_december(self):
		start, end = month_window(datetime(2023, 12, 31, 23, 0))
		assert start == datetime(2023, 12, 1)
		assert end == datetime(2023, 12, 31, 23, 59, 59)
	
	def test_timezone_is_preserved(self):
		start, end = month_window(datetime(2024, 7, 15, tzinfo=timezone.utc))
		assert start.tzinfo == timezone.utc
		assert end.tzinfo == timezone.utc


class TestValidityWindow:
	"""Test cases for validity_window and utc_now."""
	
	def test_default_is_24_hours(self):
		start = datetime(2024, 7, 1, 12, tzinfo=timezone.utc)
		valid_from, valid_to = validity_window(start)
		assert valid_from == start
		assert valid_to - valid_from == timedelta(hours=24)
	
	def test_utc_now_is_aware(self):
		assert utc_now().tzinfo == timezone.utc
	
	def test_local_now_is_aware(self):
		now = local_now()
		assert now.tzinfo is not None
		assert abs(now - utc_now()) < timedelta(minutes=1)
