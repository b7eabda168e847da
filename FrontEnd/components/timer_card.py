from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QProgressBar
from FrontEnd.styles.design_tokens import COLORS, FONTS, PHASE_TEXT


def card_style(is_break):
	"""Stylesheet for the card; break mode swaps the background and accent."""
	bg = COLORS['break_bg'] if is_break else COLORS['work_bg']
	accent = COLORS['break_accent'] if is_break else COLORS['primary']
	return (
		f"QWidget#TimerCard {{ background: {bg}; border-radius: 24px; }}"
		f"QPushButton {{ font-family: {FONTS['family']}; font-size: {FONTS['button_size']}px;"
		f" font-weight: {FONTS['button_weight']}; background: {COLORS['button_secondary_bg']};"
		f" border: 1px solid {COLORS['border']}; border-radius: 12px; padding: 0 24px; }}"
		f"QPushButton#StartBtn {{ background: {accent}; color: white; border: none; }}"
		f"QPushButton#StartBtn:hover {{ background: {COLORS['primary_hover'] if not is_break else accent}; }}"
		f"QProgressBar::chunk {{ background: {accent}; border-radius: 4px; }}"
	)


class TimerCard(QWidget):
	"""Renders a TimerController and forwards button clicks to it.

	The card holds no countdown state of its own; every label is redrawn
	from the controller after a signal.
	"""
	work_completed = Signal()

	def __init__(self, controller=None):
		super().__init__()
		self.controller = None
		self.setObjectName("TimerCard")

		layout = QVBoxLayout()
		layout.setAlignment(Qt.AlignmentFlag.AlignCenter)
		self.setLayout(layout)

		self.phase_label = QLabel(PHASE_TEXT[False])
		self.phase_label.setObjectName("PhaseLabel")
		self.phase_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
		self.phase_label.setStyleSheet(f"font-size: {FONTS['phase_size']}px; color: {COLORS['text']};")
		layout.addWidget(self.phase_label)

		self.time_label = QLabel("00:00")
		self.time_label.setObjectName("TimerLabel")
		self.time_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
		self.time_label.setStyleSheet(
			f"font-size: {FONTS['timer_size']}px; font-weight: {FONTS['timer_weight']}; color: {COLORS['text_strong']};"
		)
		layout.addWidget(self.time_label)

		self.progress_bar = QProgressBar()
		self.progress_bar.setRange(0, 1000)
		self.progress_bar.setTextVisible(False)
		layout.addWidget(self.progress_bar)

		self.info_label = QLabel("Click Start to begin")
		self.info_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
		layout.addWidget(self.info_label)

		controls = QHBoxLayout()
		controls.setSpacing(24)
		controls.addStretch()
		self.start_pause_btn = QPushButton("Start")
		self.start_pause_btn.setObjectName("StartBtn")
		self.start_pause_btn.setMinimumHeight(56)
		controls.addWidget(self.start_pause_btn)
		self.reset_btn = QPushButton("Reset")
		self.reset_btn.setMinimumHeight(56)
		controls.addWidget(self.reset_btn)
		self.break_btn = QPushButton("Take a Break")
		self.break_btn.setMinimumHeight(56)
		controls.addWidget(self.break_btn)
		controls.addStretch()
		layout.addSpacing(24)
		layout.addLayout(controls)

		self.start_pause_btn.clicked.connect(self._start_pause)
		self.reset_btn.clicked.connect(self._reset)
		self.break_btn.clicked.connect(self._start_break)

		if controller is not None:
			self.bind(controller)

	def bind(self, controller):
		"""Attach to a controller, detaching from the previous one."""
		if self.controller is not None:
			self.controller.tick.disconnect(self._on_tick)
			self.controller.state_changed.disconnect(self._on_state)
			self.controller.finished.disconnect(self._on_finished)
		self.controller = controller
		controller.tick.connect(self._on_tick)
		controller.state_changed.connect(self._on_state)
		controller.finished.connect(self._on_finished)
		self.info_label.setText("Click Start to begin")
		self.refresh()

	def refresh(self):
		c = self.controller
		self.time_label.setText(c.format_time())
		self.phase_label.setText(PHASE_TEXT[c.is_break])
		self.progress_bar.setValue(int(c.progress * 1000))
		self.start_pause_btn.setText("Pause" if c.is_running else "Start")
		self.start_pause_btn.setEnabled(not c.is_exhausted)
		self.break_btn.setEnabled(not c.is_break)
		self.setStyleSheet(card_style(c.is_break))

	# ----- Controller signals -----
	def _on_tick(self, minutes, seconds):
		self.refresh()

	def _on_state(self, snapshot):
		if snapshot.is_running:
			self.info_label.setText("Timer running...")
		elif snapshot.minutes == snapshot.total_minutes and snapshot.seconds == 0:
			self.info_label.setText("Ready")
		elif snapshot.minutes or snapshot.seconds:
			self.info_label.setText("Timer paused")
		# at 0:00 the finished handler owns the message
		self.refresh()

	def _on_finished(self, was_break):
		if was_break:
			self.info_label.setText("Break over! Start a new session when ready.")
		else:
			self.info_label.setText("Work complete! Take a break!")
			self.work_completed.emit()
		self.refresh()

	# ----- Buttons -----
	def _start_pause(self):
		self.controller.toggle()

	def _reset(self):
		self.controller.reset()

	def _start_break(self):
		self.controller.start_break()
