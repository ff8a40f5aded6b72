"""Domain layer for Groupkeeper."""
