"""Platform features for action-tracker."""
