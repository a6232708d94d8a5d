"""repboard: workout consistency leaderboard and progress tracker."""

__version__ = "0.1.0"
