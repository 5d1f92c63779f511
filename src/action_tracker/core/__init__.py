"""Core building blocks shared by action-tracker features."""
