"""BusyCrab - prevents sleep and simulates mouse activity, with terminal animations."""

__version__ = "0.3.0"
