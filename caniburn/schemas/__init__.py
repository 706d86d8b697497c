from caniburn.schemas.location import Coordinates, Location, ReverseGeocodeResult
from caniburn.schemas.fire_status import BurnStatus, FireStatusRecord, FireWatchResult
from caniburn.schemas.fire_data import FireDetection, ActiveFire, FireWeatherIndex, FireDangerRating

__all__ = [
	"Coordinates",
	"Location",
	"ReverseGeocodeResult",
	"BurnStatus",
	"FireStatusRecord",
	"FireWatchResult",
	"FireDetection",
	"ActiveFire",
	"FireWeatherIndex",
	"FireDangerRating",
]
