import logging

from Core.Services.cycle_store import CycleStore
from Core.Services.timer_engine import TimerEngine
from Application.orchestrator import Orchestrator

logger = logging.getLogger(__name__)


class AppInitializer:
    """
    Application-level service for building and tearing down a session.
    A session owns one CycleStore; nothing outlives it.
    """
    def __init__(self, store_factory=CycleStore, engine_factory=TimerEngine):
        self.store_factory = store_factory
        self.engine_factory = engine_factory
        self.store = None
        self.timer_engine = None
        self.orchestrator = None

    def initialize(self, parent=None):
        self.store = self.store_factory()
        self.timer_engine = self.engine_factory(self.store)
        self.orchestrator = Orchestrator(self.store, self.timer_engine, parent=parent)
        logger.info("AppInitializer: Session started")
        return self.orchestrator

    def shutdown(self):
        if self.orchestrator is None:
            return
        self.orchestrator.shutdown()
        logger.info(f"AppInitializer: Session ended after {len(self.store.cycles)} cycle(s)")
        self.store = None
        self.timer_engine = None
        self.orchestrator = None
