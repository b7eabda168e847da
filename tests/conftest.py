import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication


@pytest.fixture(scope="session")
def qapp():
	app = QApplication.instance() or QApplication([])
	yield app


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
	"""Point the per-user data dir at a temp directory."""
	monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
	monkeypatch.delenv("FOCUS_TIMER_WORK_MINUTES", raising=False)
	return tmp_path / "FocusTimer"
