from caniburn.services.burn_status_service import BurnStatusService
from caniburn.services.fire_status_service import FireStatusService
from caniburn.services.location_service import LocationService
from caniburn.schemas import (
	Coordinates,
	Location,
	BurnStatus,
	FireStatusRecord,
	FireWatchResult,
)
from caniburn.exceptions import (
	FireServiceError,
	InvalidCoordinates,
	LocationNotFound,
	FireStatusNotFound,
	ExternalServiceFailure,
	ValidationFailure,
)

__all__ = [
	"BurnStatusService",
	"FireStatusService",
	"LocationService",
	"Coordinates",
	"Location",
	"BurnStatus",
	"FireStatusRecord",
	"FireWatchResult",
	"FireServiceError",
	"InvalidCoordinates",
	"LocationNotFound",
	"FireStatusNotFound",
	"ExternalServiceFailure",
	"ValidationFailure",
]
