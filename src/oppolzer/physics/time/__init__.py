"""Time systems and time conversions."""
