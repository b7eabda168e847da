import json
import logging

import pytest

import app
from app import build_parser


class FakeApplication:
	def __init__(self, argv):
		self.argv = argv

	def exec(self):
		return 0


class FakeWindow:
	created = []

	def __init__(self, work_minutes):
		self.work_minutes = work_minutes
		FakeWindow.created.append(self)

	def show(self):
		pass


@pytest.fixture
def run_main(data_dir, monkeypatch):
	"""Run app.main without a real Qt application, then undo its logging setup."""
	monkeypatch.setattr(app, "QApplication", FakeApplication)
	monkeypatch.setattr(app, "MainWindow", FakeWindow)
	FakeWindow.created = []
	root = logging.getLogger()
	handlers = list(root.handlers)
	level = root.level

	def run(argv):
		with pytest.raises(SystemExit) as exit_info:
			app.main(argv)
		assert exit_info.value.code == 0
		return FakeWindow.created[-1]

	yield run
	for handler in root.handlers[:]:
		if handler not in handlers:
			root.removeHandler(handler)
			handler.close()
	root.setLevel(level)


def test_defaults():
	args = build_parser().parse_args([])
	assert args.work_minutes is None
	assert args.verbose is False

def test_work_minutes_flag():
	args = build_parser().parse_args(["--work-minutes", "45", "--verbose"])
	assert args.work_minutes == 45
	assert args.verbose is True

@pytest.mark.parametrize("value", ["0", "-5", "ten"])
def test_bad_work_minutes_exit(value):
	with pytest.raises(SystemExit):
		build_parser().parse_args(["--work-minutes", value])

def test_settings_warnings_reach_log_file(run_main, data_dir):
	data_dir.mkdir(parents=True, exist_ok=True)
	(data_dir / "settings.json").write_text("{bad", encoding="utf-8")
	window = run_main([])
	assert window.work_minutes == 25
	text = (data_dir / "focus_timer.log").read_text(encoding="utf-8")
	assert "Could not read settings" in text
	assert "Starting with 25 minute focus sessions" in text

def test_flag_beats_env_and_saved_setting(run_main, data_dir, monkeypatch):
	data_dir.mkdir(parents=True, exist_ok=True)
	(data_dir / "settings.json").write_text(json.dumps({"work_minutes": 50}), encoding="utf-8")
	monkeypatch.setenv("FOCUS_TIMER_WORK_MINUTES", "15")
	assert run_main([]).work_minutes == 15
	assert run_main(["--work-minutes", "40"]).work_minutes == 40

def test_saved_log_level_applied(run_main, data_dir):
	data_dir.mkdir(parents=True, exist_ok=True)
	(data_dir / "settings.json").write_text(json.dumps({"log_level": "WARNING"}), encoding="utf-8")
	run_main([])
	assert logging.getLogger().level == logging.WARNING
