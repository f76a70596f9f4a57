"""Bicycle rental admin: fleet inventory, reservation filtering and status changes."""
