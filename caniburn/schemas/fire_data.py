from typing import Literal, Optional, Union
import datetime as dt
from caniburn.schemas.base import BaseSchema

DangerLevel = Literal["Low", "Moderate", "High", "Very High", "Extreme"]

# Substrings of a CWFIS stage_of_control value that mark a fire as still burning
ACTIVE_STAGES = ("uc", "oc", "active")

class FireDetection(BaseSchema):
	"""A single NASA FIRMS satellite hot-spot detection."""
	latitude: float
	longitude: float
	confidence: float
	datetime: dt.datetime
	brightness: Optional[float] = None
	satellite: Optional[str] = None
	instrument: Optional[str] = None

class ActiveFire(BaseSchema):
	"""A CWFIS active fire feature, flattened from its GeoJSON properties."""
	firename: str = ""
	lat: float = 0.0
	lon: float = 0.0
	startdate: str = ""
	hectares: float = 0.0
	stage_of_control: str = ""
	agency: str = ""
	response_type: str = ""

	@property
	def is_active(self) -> bool:
		stage = self.stage_of_control.lower()
		return any(marker in stage for marker in ACTIVE_STAGES)

class FireWeatherIndex(BaseSchema):
	"""
	Canadian Forest Fire Weather Index System values from the closest station.
	Only fwi drives classification; the other codes are carried through.
	"""
	fwi: float = 0.0   # Fire Weather Index
	ffmc: float = 0.0  # Fine Fuel Moisture Code
	dmc: float = 0.0   # Duff Moisture Code
	dc: float = 0.0    # Drought Code
	isi: float = 0.0   # Initial Spread Index
	bui: float = 0.0   # Buildup Index
	dsr: float = 0.0   # Daily Severity Rating
	date: str = ""
	station: str = "Unknown"
	wmo: Optional[Union[int, str]] = None
	agency: str = ""
	prov: str = ""
	lat: float = 0.0
	lon: float = 0.0

class FireDangerRating(BaseSchema):
	level: DangerLevel
	index: int
	valid_from: dt.datetime
	valid_to: dt.datetime
