"""
Structured JSON logging for the caniburn package logger.
Outputs to stdout so log collectors can categorize levels from the payload.
"""
import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from caniburn.config import settings

PACKAGE_LOGGER = "caniburn"


class JSONFormatter(logging.Formatter):
	"""
	Custom formatter that outputs logs as JSON.
	"""

	def format(self, record: logging.LogRecord) -> str:
		log_data: Dict[str, Any] = {
			"timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat().replace("+00:00", "Z"),
			"level": record.levelname,
			"logger": record.name,
			"message": record.getMessage(),
		}

		if record.exc_info:
			log_data["exception"] = self.formatException(record.exc_info)

		# Passed as logger.info(..., extra={"extra_fields": {...}})
		if hasattr(record, "extra_fields"):
			log_data.update(record.extra_fields)

		return json.dumps(log_data)


def setup_logging(level: Optional[str] = None) -> logging.Logger:
	"""
	Send caniburn logs to stdout as JSON.

	Only the package logger is configured; the embedding application's root
	logger and its handlers are left alone.

	Args:
		level: Logging level name, defaults to LOG_LEVEL from settings

	Returns:
		The configured package logger

	Note:
		If PYTHONDEBUG is set, only the level is adjusted so that a debugger's
		own handlers keep receiving the records.
	"""
	log_level = getattr(logging, (level or settings.log_level).upper(), logging.INFO)
	package_logger = logging.getLogger(PACKAGE_LOGGER)
	package_logger.setLevel(log_level)

	if os.getenv("PYTHONDEBUG", "").lower() in ("1", "true"):
		return package_logger

	# stdout, not stderr: collectors treat stderr as errors
	handler = logging.StreamHandler(sys.stdout)
	handler.setFormatter(JSONFormatter())
	package_logger.handlers[:] = [handler]
	package_logger.propagate = False

	# Request lines from the HTTP clients are noise at INFO
	logging.getLogger("httpx").setLevel(logging.WARNING)
	logging.getLogger("httpcore").setLevel(logging.WARNING)
	return package_logger
