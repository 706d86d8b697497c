from fastapi import status
from typing import Any, Optional

class FireServiceError(Exception):
	"""
	Base exception class for all caniburn errors.
	Carries a machine-readable code and an HTTP-style status for callers
	that need to convey severity.
	"""
	def __init__(
		self,
		message: str,
		code: str,
		status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
		detail: Optional[str] = None
	):
		self.message = message
		self.code = code
		self.status_code = status_code
		self.detail = detail or message
		super().__init__(self.message)

class InvalidCoordinates(FireServiceError):
	"""
	Raised when latitude/longitude are non-numeric, NaN or out of range.
	Maps to HTTP 400.
	"""
	def __init__(self, latitude: Any, longitude: Any):
		self.latitude = latitude
		self.longitude = longitude
		super().__init__(
			message=(
				f"Invalid GPS coordinates: latitude {latitude}, longitude {longitude}. "
				"Latitude must be between -90 and 90, longitude between -180 and 180."
			),
			code="INVALID_COORDINATES",
			status_code=status.HTTP_400_BAD_REQUEST
		)

class LocationNotFound(FireServiceError):
	"""
	Raised when reverse geocoding yields no usable country or region.
	Maps to HTTP 404.
	"""
	def __init__(self, latitude: float, longitude: float):
		self.latitude = latitude
		self.longitude = longitude
		super().__init__(
			message=f"Unable to determine location for coordinates: {latitude}, {longitude}",
			code="LOCATION_NOT_FOUND",
			status_code=status.HTTP_404_NOT_FOUND
		)

class FireStatusNotFound(FireServiceError):
	"""
	Raised when no provider, static entry or seasonal rule answers for a location.
	Maps to HTTP 404.
	"""
	def __init__(self, location: str):
		self.location = location
		super().__init__(
			message=f"Fire status not available for location: {location}",
			code="FIRE_STATUS_NOT_FOUND",
			status_code=status.HTTP_404_NOT_FOUND
		)

class ExternalServiceFailure(FireServiceError):
	"""
	Wraps a network or parse fault from a named collaborator.
	Maps to HTTP 503.
	"""
	def __init__(self, service: str, error: Optional[Any] = None):
		self.service = service
		self.original_message = str(error) if error is not None and str(error) else "Unknown error"
		super().__init__(
			message=f"External service error from {service}: {self.original_message}",
			code="EXTERNAL_SERVICE_ERROR",
			status_code=status.HTTP_503_SERVICE_UNAVAILABLE
		)

class ValidationFailure(FireServiceError):
	"""
	Generic field-level validation failure.
	Maps to HTTP 400.
	"""
	def __init__(self, field: str, value: Any, reason: str):
		self.field = field
		self.value = value
		self.reason = reason
		super().__init__(
			message=f'Validation failed for field "{field}" with value "{value}": {reason}',
			code="VALIDATION_ERROR",
			status_code=status.HTTP_400_BAD_REQUEST
		)
