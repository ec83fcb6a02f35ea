"""Vehicles API: car records enriched with live pricing and address lookups."""
