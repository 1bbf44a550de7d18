import logging
import time
from enum import Enum

from Core.Services.time_derivation import remaining_seconds

logger = logging.getLogger(__name__)


class TimerPhase(Enum):
    IDLE = 0
    RUNNING = 1
    FINISHED = 2


class TimerEngine:
    """
    Core countdown engine.
    Turns a monotonic clock into elapsed seconds for the store's active cycle.
    Qt-free: the hosting layer calls tick() from its own repeating timer.
    """
    def __init__(self, store, clock=time.monotonic):
        self.store = store
        self.clock = clock
        self.phase = TimerPhase.IDLE
        self.start_time = None
        self.cycle_id = None

    @property
    def is_running(self):
        return self.phase == TimerPhase.RUNNING

    def start(self):
        """Begins counting for whatever cycle the store currently holds as active."""
        cycle = self.store.get_active_cycle()
        if cycle is None:
            self.stop()
            return False
        self.phase = TimerPhase.RUNNING
        self.cycle_id = cycle.id
        self.start_time = self.clock()
        self.store.set_elapsed_seconds(0)
        return True

    def stop(self):
        """Stops ticking. The store and its active cycle are left untouched."""
        self.phase = TimerPhase.IDLE
        self.start_time = None
        self.cycle_id = None

    def tick(self):
        """
        Pushes the current elapsed seconds into the store.
        Returns True exactly once, on the tick that takes the countdown to zero.
        """
        if not self.is_running:
            return False

        cycle = self.store.get_active_cycle()
        if cycle is None or cycle.id != self.cycle_id:
            # Active cycle vanished or was superseded without a restart
            logger.debug("TimerEngine: No matching active cycle, stopping")
            self.stop()
            return False

        # Measured from start_time, not counted per tick
        elapsed = max(0, int(self.clock() - self.start_time))
        elapsed = min(elapsed, cycle.total_seconds)
        self.store.set_elapsed_seconds(elapsed)

        if remaining_seconds(cycle, elapsed) == 0:
            self.phase = TimerPhase.FINISHED
            logger.info(f"TimerEngine: Cycle {cycle.id} finished")
            return True
        return False
