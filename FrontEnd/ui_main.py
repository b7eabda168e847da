from PySide6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QPushButton
from PySide6.QtCore import Qt
import logging
from BackEnd.services.timer_controller import TimerController
from BackEnd.core.settings import DEFAULT_WORK_MINUTES
from FrontEnd.components.timer_card import TimerCard
from FrontEnd.components.footer_sessions import FooterSessions
from FrontEnd.styles.design_tokens import COLORS

LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
	def __init__(self, work_minutes=DEFAULT_WORK_MINUTES):
		super().__init__()
		self.setWindowTitle("Focus Timer")
		self.resize(720, 520)
		self.setStyleSheet(f"QMainWindow {{ background: {COLORS['background']}; }}")
		self.work_minutes = work_minutes
		self.controller = None

		outer = QVBoxLayout()
		outer.setContentsMargins(32, 32, 32, 32)
		outer.setSpacing(0)
		outer.addStretch()

		self.timer_card = TimerCard()
		outer.addWidget(self.timer_card, alignment=Qt.AlignmentFlag.AlignHCenter)
		outer.addStretch()

		# New Session sits bottom-left, completed counter bottom-right
		bottom_row = QHBoxLayout()
		bottom_row.setContentsMargins(0, 0, 12, 12)
		self.new_session_btn = QPushButton("New Session")
		self.new_session_btn.setObjectName("NewSessionBtn")
		bottom_row.addWidget(self.new_session_btn, alignment=Qt.AlignmentFlag.AlignLeft)
		bottom_row.addStretch()
		self.footer_sessions = FooterSessions()
		bottom_row.addWidget(self.footer_sessions, alignment=Qt.AlignmentFlag.AlignRight)
		outer.addLayout(bottom_row)

		container = QWidget()
		container.setLayout(outer)
		self.setCentralWidget(container)

		self.timer_card.work_completed.connect(self._on_work_completed)
		self.new_session_btn.clicked.connect(self._new_session)
		self._new_session()

	def _new_session(self):
		"""Replace the controller with a fresh work session.

		A controller never leaves break mode, so returning to work means
		building a new one.
		"""
		if self.controller is not None:
			self.controller.dispose()
			self.controller.deleteLater()
		self.controller = TimerController(self.work_minutes, parent=self)
		self.timer_card.bind(self.controller)
		LOGGER.info("New %d minute focus session", self.work_minutes)

	def _on_work_completed(self):
		self.footer_sessions.set_completed(self.footer_sessions.completed + 1)

	def closeEvent(self, event):
		# Stop the clock so no tick lands on a half-destroyed window
		if self.controller is not None:
			self.controller.dispose()
		super().closeEvent(event)
