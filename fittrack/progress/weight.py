"""Weight Tracker.

Append-only (date, weight) log. Entries are never deduplicated by date; the
last entry is the current weight.
"""

import math
from datetime import date

from loguru import logger

from fittrack.progress.types import WeightProgress

DEFAULT_GOAL_OFFSET = 10


def _valid_weight(value: object) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
        and value > 0
    )


def log_weight(
    progress: WeightProgress | None,
    value: float,
    *,
    on: date,
    goal: float | None = None,
) -> WeightProgress | None:
    """Append a weight entry.

    Args:
        progress: Existing weight log, or None
        value: Weight to record
        on: Date of the entry
        goal: Goal used when the log has to be initialized; defaults to ten
            above the first entry

    Returns:
        The extended log, or the input unchanged when the value is rejected
    """
    if not _valid_weight(value):
        logger.warning("Rejected weight entry", value=value)
        return progress

    if progress is None:
        if goal is None:
            goal = value + DEFAULT_GOAL_OFFSET
            logger.info("Starting weight log without a goal, using default", value=value, goal=goal)
        progress = WeightProgress(dates=[], weights=[], goal=goal)

    logger.info("Logged weight", value=value, on=on.isoformat(), entries=len(progress.weights) + 1)
    return progress.model_copy(
        update={
            "dates": [*progress.dates, on.isoformat()],
            "weights": [*progress.weights, float(value)],
        }
    )


def set_goal(progress: WeightProgress | None, value: float) -> WeightProgress | None:
    """Replace the goal without touching history; starts an empty log if none exists."""
    if not _valid_weight(value):
        logger.warning("Rejected weight goal", value=value)
        return progress
    if progress is None:
        return WeightProgress(dates=[], weights=[], goal=float(value))
    return progress.model_copy(update={"goal": float(value)})
