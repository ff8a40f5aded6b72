"""Infrastructure adapters for Groupkeeper."""
