"""Beach Buddy: beach conditions scoring and visit window planning."""

__version__ = "0.1.0"
