"""
Parser for NASA FIRMS area CSV responses.
"""
import csv
import io
from typing import List, Optional
from caniburn.schemas.fire_data import FireDetection
from caniburn.utils.datetime_utils import parse_acquisition_datetime
import logging

logger = logging.getLogger(__name__)

# Column positions in the FIRMS area CSV:
# latitude,longitude,brightness,scan,track,acq_date,acq_time,satellite,instrument,confidence,...
LATITUDE = 0
LONGITUDE = 1
BRIGHTNESS = 2
ACQ_DATE = 5
ACQ_TIME = 6
SATELLITE = 7
INSTRUMENT = 8
CONFIDENCE = 9

# Detections below this confidence are dropped at parse time
MIN_CONFIDENCE = 50


class FIRMSCSVParser:
	"""Parser for turning FIRMS CSV text into FireDetection records."""
	
	@staticmethod
	def parse_optional_float(value: Optional[str]) -> Optional[float]:
		"""
		Parse an optional numeric column.
		
		Returns:
			Float value, or None when the column is empty, unparseable or zero
		"""
		try:
			parsed = float(value)
		except (TypeError, ValueError):
			return None
		return parsed or None
	
	@staticmethod
	def parse_row(values: List[str]) -> FireDetection:
		"""
		Parse one data row.
		
		Raises:
			ValueError: if a required column (position, date, confidence) is malformed
		"""
		return FireDetection(
			latitude=float(values[LATITUDE]),
			longitude=float(values[LONGITUDE]),
			brightness=FIRMSCSVParser.parse_optional_float(values[BRIGHTNESS]),
			datetime=parse_acquisition_datetime(values[ACQ_DATE], values[ACQ_TIME]),
			satellite=values[SATELLITE] or None,
			instrument=values[INSTRUMENT] or None,
			confidence=float(values[CONFIDENCE]),
		)
	
	@staticmethod
	def parse(csv_data: str) -> List[FireDetection]:
		"""
		Parse a FIRMS CSV document.
		
		Rows shorter than the header and rows that fail to parse are skipped
		individually; detections with confidence below MIN_CONFIDENCE are dropped.
		
		Args:
			csv_data: Raw CSV text including the header line
		
		Returns:
			List of FireDetection objects
		"""
		rows = list(csv.reader(io.StringIO(csv_data.strip())))
		if len(rows) <= 1:
			return []
		
		header = rows[0]
		detections = []
		skipped = 0
		for values in rows[1:]:
			if len(values) < len(header):
				skipped += 1
				continue
			try:
				detection = FIRMSCSVParser.parse_row(values)
			except (ValueError, IndexError) as e:
				logger.debug(f"Skipping malformed FIRMS row {values}: {str(e)}")
				skipped += 1
				continue
			
			if detection.confidence >= MIN_CONFIDENCE:
				detections.append(detection)
		
		if skipped:
			logger.warning(f"Skipped {skipped} malformed FIRMS rows")
		return detections
