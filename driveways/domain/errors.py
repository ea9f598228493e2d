"""Domain-level exceptions."""


class DrivewaysError(Exception):
    """Base class for all errors raised by this package."""


class ConfigurationError(DrivewaysError):
    """A required setting (e.g. the geocoder access token) is missing."""


class InvalidStateTransition(DrivewaysError):
    """A search session was asked to do something its current state forbids."""
