"""Exception types for Waldo.

Searches never raise for bad criteria; they return ``None`` instead.
These exceptions cover misconfiguration of a finder.
"""


class WaldoError(Exception):
    """Base class for all Waldo errors."""
    pass


class InvalidOptionsError(WaldoError):
    """Raised when a FinderConfig cannot be used as given."""
    pass
