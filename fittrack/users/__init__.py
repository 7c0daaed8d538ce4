from fittrack.users.profile import Profile, ProfileStatsUpdate

__all__ = ["Profile", "ProfileStatsUpdate"]
