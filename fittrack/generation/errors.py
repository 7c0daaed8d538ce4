"""Errors raised by plan generators.

The store catches every generator failure and commits a synthetic fallback,
so these never reach store callers.
"""


class GenerationError(Exception):
    """Base exception for all plan generation errors."""

    pass


class PlanGenerationError(GenerationError):
    """Raised when a generator cannot build a plan (e.g., empty template library)."""

    pass
