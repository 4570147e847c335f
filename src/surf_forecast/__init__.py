"""Caching StormGlass forecast client."""

import logging

__version__ = "0.1.0"

# The host application decides where log records go
logging.getLogger(__name__).addHandler(logging.NullHandler())
