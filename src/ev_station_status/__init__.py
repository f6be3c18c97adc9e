"""Live status dashboard for EV charging stations."""

__version__ = "0.1.0"
