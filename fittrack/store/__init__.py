"""Store module - the single owner of a user's plans, progress and weight log."""

from fittrack.store.facade import PlanStore, create_store
from fittrack.store.persistence import InMemoryStateRepository, JsonFileStateRepository, StateRepository
from fittrack.store.state import TrackerState, hydrate_state

__all__ = [
    "InMemoryStateRepository",
    "JsonFileStateRepository",
    "PlanStore",
    "StateRepository",
    "TrackerState",
    "create_store",
    "hydrate_state",
]
