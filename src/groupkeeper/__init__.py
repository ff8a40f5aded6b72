"""Groupkeeper: access-control group directory."""

__version__ = "0.1.0"
