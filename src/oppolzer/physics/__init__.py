"""Physical models, time systems and frame transformations used by OPPOLZER."""
