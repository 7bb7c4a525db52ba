"""Geocoding facade: forward and reverse lookups with address normalization."""
