"""Backman: backup configuration and service registry core."""
