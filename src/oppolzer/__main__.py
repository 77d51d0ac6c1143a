"""Allow running OPPOLZER with ``python -m oppolzer``."""

# Local Imports
from . import main

main()
