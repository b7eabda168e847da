import json
import logging

from BackEnd.core.clock import fmt_mmss, total_seconds
from BackEnd.core.paths import settings_path, log_path
from BackEnd.core.settings import TimerSettings, load_settings, save_settings


def write(path, payload):
	path.parent.mkdir(parents=True, exist_ok=True)
	path.write_text(payload, encoding="utf-8")
	return path


def test_paths_live_in_data_dir(data_dir):
	assert settings_path() == data_dir / "settings.json"
	assert log_path() == data_dir / "focus_timer.log"
	assert data_dir.is_dir()

def test_missing_file_gives_defaults(data_dir):
	assert load_settings() == TimerSettings(work_minutes=25, log_level="INFO")

def test_save_and_load(data_dir):
	path = save_settings(TimerSettings(work_minutes=50, log_level="DEBUG"))
	assert path == settings_path()
	assert json.loads(path.read_text(encoding="utf-8")) == {"work_minutes": 50, "log_level": "DEBUG"}
	assert load_settings() == TimerSettings(work_minutes=50, log_level="DEBUG")

def test_malformed_json_falls_back(data_dir, caplog):
	path = write(settings_path(), "{not json")
	with caplog.at_level(logging.WARNING):
		assert load_settings(path) == TimerSettings()
	assert "Could not read settings" in caplog.text

def test_non_object_json_falls_back(data_dir):
	path = write(settings_path(), "[1, 2]")
	assert load_settings(path) == TimerSettings()

def test_invalid_values_fall_back(data_dir, caplog):
	path = write(settings_path(), json.dumps({"work_minutes": 0, "log_level": "loud"}))
	with caplog.at_level(logging.WARNING):
		settings = load_settings(path)
	assert settings == TimerSettings()
	assert "Invalid work_minutes" in caplog.text
	assert "Unknown log_level" in caplog.text

def test_boolean_minutes_rejected(data_dir):
	path = write(settings_path(), json.dumps({"work_minutes": True}))
	assert load_settings(path).work_minutes == 25

def test_log_level_is_case_insensitive(data_dir):
	path = write(settings_path(), json.dumps({"log_level": "warning"}))
	assert load_settings(path).log_level == "WARNING"

def test_env_override(data_dir, monkeypatch):
	save_settings(TimerSettings(work_minutes=50))
	monkeypatch.setenv("FOCUS_TIMER_WORK_MINUTES", "15")
	assert load_settings().work_minutes == 15

def test_bad_env_override_ignored(data_dir, monkeypatch, caplog):
	monkeypatch.setenv("FOCUS_TIMER_WORK_MINUTES", "soon")
	with caplog.at_level(logging.WARNING):
		assert load_settings().work_minutes == 25
	assert "FOCUS_TIMER_WORK_MINUTES" in caplog.text

def test_clock_helpers():
	assert fmt_mmss(5, 0) == "05:00"
	assert fmt_mmss(24, 59) == "24:59"
	assert fmt_mmss(120, 7) == "120:07"
	assert total_seconds(24, 59) == 1499
