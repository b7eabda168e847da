import json
import logging
import os
from dataclasses import asdict, dataclass

from BackEnd.core.paths import settings_path

LOGGER = logging.getLogger(__name__)

DEFAULT_WORK_MINUTES = 25
DEFAULT_LOG_LEVEL = "INFO"
WORK_MINUTES_ENV = "FOCUS_TIMER_WORK_MINUTES"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class TimerSettings:
	work_minutes: int = DEFAULT_WORK_MINUTES
	log_level: str = DEFAULT_LOG_LEVEL


def is_valid_minutes(value) -> bool:
	# bool is an int subclass; True must not pass as one minute
	return isinstance(value, int) and not isinstance(value, bool) and value > 0

def _read_json(path):
	if not path.exists():
		return {}
	try:
		with open(path, 'r', encoding='utf-8') as f:
			data = json.load(f)
	except (json.JSONDecodeError, OSError) as e:
		LOGGER.warning("Could not read settings from %s: %s", path, e)
		return {}
	if not isinstance(data, dict):
		LOGGER.warning("Ignoring settings file %s: expected a JSON object", path)
		return {}
	return data

def load_settings(path=None) -> TimerSettings:
	"""Load settings from disk, then apply the environment override.

	Bad values never raise; each one is logged and replaced by its default.
	"""
	path = path or settings_path()
	data = _read_json(path)
	settings = TimerSettings()

	work_minutes = data.get("work_minutes", DEFAULT_WORK_MINUTES)
	if is_valid_minutes(work_minutes):
		settings.work_minutes = work_minutes
	else:
		LOGGER.warning("Invalid work_minutes %r in %s, using %d", work_minutes, path, DEFAULT_WORK_MINUTES)

	log_level = str(data.get("log_level", DEFAULT_LOG_LEVEL)).upper()
	if log_level in LOG_LEVELS:
		settings.log_level = log_level
	else:
		LOGGER.warning("Unknown log_level %r in %s, using %s", log_level, path, DEFAULT_LOG_LEVEL)

	env_value = os.environ.get(WORK_MINUTES_ENV)
	if env_value:
		try:
			env_minutes = int(env_value)
		except ValueError:
			env_minutes = None
		if env_minutes is not None and env_minutes > 0:
			settings.work_minutes = env_minutes
		else:
			LOGGER.warning("Ignoring %s=%r: expected a positive integer", WORK_MINUTES_ENV, env_value)
	return settings

def save_settings(settings: TimerSettings, path=None):
	"""Write settings as indented JSON, creating the directory if needed."""
	path = path or settings_path()
	try:
		path.parent.mkdir(parents=True, exist_ok=True)
		with open(path, 'w', encoding='utf-8') as f:
			json.dump(asdict(settings), f, indent=4)
	except OSError as e:
		LOGGER.error("Error saving settings file %s: %s", path, e)
		raise
	return path
