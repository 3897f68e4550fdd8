"""
Console logging setup for the entry points (uvicorn api:app, streamlit run).
Only touches loguru's default sink and the sink added here; handlers added by a host stay.
"""

import sys

from loguru import logger  # console logger

from .settings import CATALOG_LOG_LEVEL

LOG_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}"
DEFAULT_HANDLER_ID = 0  # loguru's built-in stderr sink

_handler_id = None  # sink added by the last configure_logging call


def configure_logging(level: str = CATALOG_LOG_LEVEL) -> int:
	"""Install (or replace) a single stderr sink at the given level and return its id."""
	global _handler_id
	if _handler_id is None:
		try:
			logger.remove(DEFAULT_HANDLER_ID)  # avoid printing every line twice
		except ValueError:
			pass  # default sink already removed by the host
	else:
		logger.remove(_handler_id)
	_handler_id = logger.add(sys.stderr, level=level, format=LOG_FORMAT)
	return _handler_id
