import logging

from PyQt6.QtCore import QObject, pyqtSignal, QTimer

from Core.Services.cycle_validator import validate, collect_issues, CycleValidationError
from Core.Services.timer_engine import TimerPhase
from Adapters.External.ntfy_notifier import NtfyNotifier
from Infrastructure.variables import TICK_INTERVAL_MS, NTFY_PRIORITY_URGENT

logger = logging.getLogger(__name__)


class Orchestrator(QObject):
    """
    Application-level orchestrator (Hexagonal Application Layer).
    Runs new-cycle submissions through the validator and the store,
    drives the countdown ticks and announces completion.
    """
    cycle_started = pyqtSignal(object)      # Cycle
    cycle_finished = pyqtSignal(object)     # Cycle
    display_changed = pyqtSignal(object)    # DisplayTuple
    validation_failed = pyqtSignal(object)  # [CycleValidationError]

    def __init__(self, store, timer_engine, tick_interval_ms=TICK_INTERVAL_MS, parent=None):
        super().__init__(parent)
        self.store = store
        self.timer_engine = timer_engine
        self._last_display = None

        self.tick_timer = QTimer(self)
        self.tick_timer.setInterval(tick_interval_ms)
        self.tick_timer.timeout.connect(self.on_tick)

    def submit_new_cycle(self, task, minutes_amount):
        """
        Called by the form. Returns the new Cycle, or None when the input
        was rejected (state is left exactly as it was).
        """
        try:
            data = validate(task, minutes_amount)
        except CycleValidationError:
            issues = collect_issues(task, minutes_amount)
            logger.info(f"Orchestrator: Rejected new cycle ({', '.join(type(i).__name__ for i in issues)})")
            self.validation_failed.emit(issues)
            return None

        cycle = self.store.create_cycle(data.task, data.minutes_amount)
        logger.debug(f"Orchestrator: Active cycle {cycle.to_dict()}")
        self.timer_engine.start()
        self.tick_timer.start()

        self.cycle_started.emit(cycle)
        self.refresh_display(force=True)
        return cycle

    def on_tick(self):
        finished = self.timer_engine.tick()
        self.refresh_display()

        if finished:
            self.tick_timer.stop()
            self._handle_cycle_finished()
        elif not self.timer_engine.is_running:
            # No active cycle to count down anymore
            self.tick_timer.stop()

    def refresh_display(self, force=False):
        display = self.current_display()
        if force or display != self._last_display:
            self._last_display = display
            self.display_changed.emit(display)
        return display

    def current_display(self):
        return self.store.get_display_tuple()

    def is_running(self):
        return self.timer_engine.phase == TimerPhase.RUNNING

    def shutdown(self):
        """Stops the tick driver; called when the session ends."""
        self.tick_timer.stop()
        self.timer_engine.stop()

    def _handle_cycle_finished(self):
        cycle = self.store.get_active_cycle()
        if cycle is None:
            return

        NtfyNotifier.send(
            title="Cycle Complete! ⏱️",
            message=f"'{cycle.task}' is done ({cycle.minutes_amount} min).",
            tags="heavy_check_mark,alarm_clock",
            priority=NTFY_PRIORITY_URGENT
        )
        self.cycle_finished.emit(cycle)
