"""User profile.

Profile fields use the onboarding units: height in inches, weights in lbs.
Every field is optional because a profile is filled in gradually; consumers
apply safe defaults where they need a value.
"""

from pydantic import Field

from fittrack.plans.types import PlanDocument


class Profile(PlanDocument):
    id: str | None = None
    name: str | None = None
    email: str | None = None
    age: int | None = None
    height: float | None = None
    current_weight: float | None = None
    target_weight: float | None = None
    goal_type: str | None = None
    experience_level: str | None = None
    preferred_workout_days: list[str] = Field(default_factory=list)
    sex: str | None = None
    has_completed_onboarding: bool = False


class ProfileStatsUpdate(PlanDocument):
    """Partial profile update from the stats form; unset fields are left alone."""

    name: str | None = None
    current_weight: float | None = None
    target_weight: float | None = None
    height: float | None = None
    goal_type: str | None = None
    experience_level: str | None = None
    preferred_workout_days: list[str] | None = None
    age: int | None = None
    sex: str | None = None

    def changes(self) -> dict:
        """Fields explicitly set on this update, by attribute name."""
        return self.model_dump(exclude_none=True)

    @property
    def requires_regeneration(self) -> bool:
        return self.goal_type is not None or self.experience_level is not None
