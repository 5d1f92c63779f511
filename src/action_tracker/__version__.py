"""Version information for action-tracker."""

__version__ = "1.0.0"
