"""Exceptions raised by BusyCrab."""


class BusyCrabError(Exception):
    """Base class for all BusyCrab errors."""


class SleepPreventionError(BusyCrabError):
    """The platform refused (or cannot) keep the system awake."""
