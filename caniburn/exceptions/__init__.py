from caniburn.exceptions.base import (
	FireServiceError,
	InvalidCoordinates,
	LocationNotFound,
	FireStatusNotFound,
	ExternalServiceFailure,
	ValidationFailure,
)

__all__ = [
	"FireServiceError",
	"InvalidCoordinates",
	"LocationNotFound",
	"FireStatusNotFound",
	"ExternalServiceFailure",
	"ValidationFailure",
]
