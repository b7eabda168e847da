import logging
from dataclasses import dataclass

from PySide6.QtCore import QObject, QTimer, Signal

from BackEnd.core.clock import fmt_mmss, total_seconds
from BackEnd.core.settings import DEFAULT_WORK_MINUTES, is_valid_minutes

LOGGER = logging.getLogger(__name__)

BREAK_MINUTES = 5
TICK_INTERVAL_MS = 1000


@dataclass(frozen=True)
class TimerSnapshot:
	minutes: int
	seconds: int
	is_running: bool
	is_break: bool
	total_minutes: int


class TimerController(QObject):
	"""Single work/break countdown driven by one 1-second QTimer.

	The QTimer is the only tick source. Every operation that can change
	whether the countdown should advance goes through _sync_clock, which
	stops the timer before deciding whether to start it again.
	"""
	tick = Signal(int, int)  # remaining minutes, seconds
	state_changed = Signal(object)  # TimerSnapshot
	finished = Signal(bool)  # is_break of the session that ran out

	def __init__(self, work_minutes=DEFAULT_WORK_MINUTES, parent=None):
		super().__init__(parent)
		if not is_valid_minutes(work_minutes):
			raise ValueError(f"work_minutes must be a positive integer, got {work_minutes!r}")
		self.work_minutes = work_minutes
		self.break_minutes = BREAK_MINUTES
		self.remaining_minutes = work_minutes
		self.remaining_seconds = 0
		self.is_break = False
		self._running = False
		self._disposed = False
		self._clock = QTimer(self)
		self._clock.setInterval(TICK_INTERVAL_MS)
		self._clock.timeout.connect(self._on_tick)

	# ----- Observable state -----
	@property
	def is_running(self):
		# 0:00 and a disposed controller can never read as running
		return self._running and not self._disposed and not self.is_exhausted

	@property
	def is_exhausted(self):
		return self.remaining_minutes == 0 and self.remaining_seconds == 0

	@property
	def total_minutes(self):
		return self.break_minutes if self.is_break else self.work_minutes

	@property
	def progress(self):
		"""Elapsed fraction of the current session, clamped to [0, 1]."""
		full = total_seconds(self.total_minutes, 0)
		left = total_seconds(self.remaining_minutes, self.remaining_seconds)
		return min(1.0, max(0.0, (full - left) / full))

	@property
	def clock_active(self):
		return self._clock.isActive()

	def snapshot(self) -> TimerSnapshot:
		return TimerSnapshot(
			minutes=self.remaining_minutes,
			seconds=self.remaining_seconds,
			is_running=self.is_running,
			is_break=self.is_break,
			total_minutes=self.total_minutes,
		)

	def format_time(self) -> str:
		return fmt_mmss(self.remaining_minutes, self.remaining_seconds)

	# ----- Operations -----
	def start(self):
		if self._disposed:
			return
		LOGGER.debug("start at %s (break=%s)", self.format_time(), self.is_break)
		self._running = True
		self._check_exhausted()
		self._sync_clock()
		self._emit_state()

	def pause(self):
		LOGGER.debug("pause at %s", self.format_time())
		self._running = False
		self._sync_clock()
		self._emit_state()

	def toggle(self):
		if self.is_running:
			self.pause()
		else:
			self.start()

	def reset(self):
		"""Stop and rewind the current session kind to its full duration."""
		self._running = False
		self.remaining_minutes = self.total_minutes
		self.remaining_seconds = 0
		LOGGER.debug("reset to %s (break=%s)", self.format_time(), self.is_break)
		self._sync_clock()
		self._emit_state()

	def start_break(self):
		"""Enter break mode. There is no way back to work on this controller."""
		self.is_break = True
		self._running = False
		self.remaining_minutes = self.break_minutes
		self.remaining_seconds = 0
		LOGGER.debug("break started at %s", self.format_time())
		self._sync_clock()
		self._emit_state()

	def dispose(self):
		if self._disposed:
			return
		self._disposed = True
		self._running = False
		self._clock.stop()
		LOGGER.debug("disposed at %s", self.format_time())

	# ----- Clock internals -----
	def _should_tick(self):
		return self.is_running

	def _sync_clock(self):
		should_tick = self._should_tick()
		if should_tick and self._clock.isActive():
			return
		self._clock.stop()
		if should_tick:
			self._clock.start()

	def _check_exhausted(self):
		"""Force the running flag off at 0:00. Returns True if it did."""
		if self._running and self.is_exhausted:
			self._running = False
			LOGGER.debug("countdown exhausted (break=%s)", self.is_break)
			return True
		return False

	def _on_tick(self):
		# Fired by the QTimer; reads current state, never a captured copy.
		if self._disposed:
			self._clock.stop()
			return
		if not self._should_tick():
			if self._check_exhausted():
				self._emit_state()
			self._sync_clock()
			return

		if self.remaining_seconds > 0:
			self.remaining_seconds -= 1
		elif self.remaining_minutes > 0:
			self.remaining_minutes -= 1
			self.remaining_seconds = 59
		self.tick.emit(self.remaining_minutes, self.remaining_seconds)

		if self._check_exhausted():
			self._sync_clock()
			self._emit_state()
			self.finished.emit(self.is_break)

	def _emit_state(self):
		self.state_changed.emit(self.snapshot())
