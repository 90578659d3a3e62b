"""ShareIt - peer-to-peer item sharing backend and gateway."""

__version__ = "1.0.0"
