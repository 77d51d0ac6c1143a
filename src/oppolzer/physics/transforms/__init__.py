"""Angle arguments and transformations feeding the diurnal polar motion series."""
