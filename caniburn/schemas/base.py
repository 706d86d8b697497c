from typing import Any, Dict
from pydantic import BaseModel, ConfigDict

class BaseSchema(BaseModel):
	"""
	Base schema class with JSON-friendly serialization helpers.
	Datetimes are emitted as ISO strings and parsed back by pydantic.
	"""
	
	model_config = ConfigDict(frozen=True)
	
	def to_dict(self) -> Dict[str, Any]:
		"""Convert model to a JSON-compatible dictionary."""
		return self.model_dump(mode="json")
	
	@classmethod
	def from_dict(cls, data: Dict[str, Any]) -> "BaseSchema":
		"""Create model instance from dictionary (ISO datetime strings are accepted)."""
		return cls.model_validate(data)
