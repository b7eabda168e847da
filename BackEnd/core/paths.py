import os
from pathlib import Path

APP_NAME = "FocusTimer"

def user_data_dir(app_name=APP_NAME):
	"""Return per-user data dir (Windows/macOS/Linux)."""
	if os.name == "nt":
		base = os.environ.get("LOCALAPPDATA", os.path.expanduser("~\\AppData\\Local"))
	elif os.name == "posix":
		base = os.environ.get("XDG_DATA_HOME", os.path.expanduser("~/.local/share"))
	else:
		base = os.path.expanduser("~")
	path = Path(base) / app_name
	path.mkdir(parents=True, exist_ok=True)
	return path

def settings_path():
	"""Return Path to settings.json inside user data dir."""
	return user_data_dir() / "settings.json"

def log_path():
	return user_data_dir() / "focus_timer.log"
