import logging
import time

from Core.Entities.cycle import Cycle
from Core.Services.time_derivation import derive_display

logger = logging.getLogger(__name__)


class CycleStore:
    """
    Core service owning the cycle history, the active cycle pointer
    and the seconds elapsed on the active cycle.
    Lives for one application session; nothing is persisted.
    """
    def __init__(self, clock=time.time):
        self._clock = clock
        self._cycles = []
        self._active_cycle_id = None
        self._amount_seconds_passed = 0
        self._last_id = 0
        self._reported_missing_id = None

    @property
    def cycles(self):
        return tuple(self._cycles)

    @property
    def active_cycle_id(self):
        return self._active_cycle_id

    def _next_id(self):
        # Creation timestamp in ms, bumped when the clock hasn't moved past the last id
        candidate = int(self._clock() * 1000)
        if candidate <= self._last_id:
            candidate = self._last_id + 1
        self._last_id = candidate
        return str(candidate)

    def create_cycle(self, task, minutes_amount):
        """Appends a new cycle and makes it the active one. Input must already be validated."""
        cycle = Cycle(id=self._next_id(), task=task, minutes_amount=minutes_amount)
        self._cycles.append(cycle)
        self._active_cycle_id = cycle.id
        self._amount_seconds_passed = 0
        logger.info(f"CycleStore: Started cycle {cycle.id} '{cycle.task}' ({cycle.minutes_amount} min)")
        return cycle

    def get_active_cycle(self):
        if self._active_cycle_id is None:
            return None
        cycle = next((c for c in self._cycles if c.id == self._active_cycle_id), None)
        if cycle is None and self._reported_missing_id != self._active_cycle_id:
            self._reported_missing_id = self._active_cycle_id
            logger.warning(f"CycleStore: Active cycle {self._active_cycle_id} not found, treating as idle")
        return cycle

    def get_elapsed_seconds(self):
        return self._amount_seconds_passed

    def set_elapsed_seconds(self, seconds):
        if seconds < 0:
            raise ValueError(f"Elapsed seconds must be non-negative, got {seconds}")
        self._amount_seconds_passed = int(seconds)

    def get_display_tuple(self):
        return derive_display(self.get_active_cycle(), self._amount_seconds_passed)
