"""
Error types raised by the randomiser.

Every fatal condition derives from RandomiserError so the run driver can
log and re-raise a single family. Items that are not yet reachable are not
errors; the placement engine returns None for those.
"""


class RandomiserError(Exception):
    """Base class for all randomiser failures."""


class ConfigurationError(RandomiserError):
    """Unknown item key, unknown start mode, malformed static data or config."""


class InfeasibleConstraintError(RandomiserError):
    """No region at all satisfies a required placement constraint."""
