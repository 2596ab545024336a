"""Custom exception hierarchy for autorange.

Every failure in this package is a programming error on the caller's side
(bad arguments, bad configuration); nothing here is transient or retried.
"""

from __future__ import annotations


class AutorangeError(Exception):
    """Base class for all autorange exceptions."""


class InvalidArgumentError(AutorangeError, ValueError):
    """Raised when a searcher, term or query receives an invalid argument."""


class ConfigError(AutorangeError):
    """Raised when configuration loading or validation fails."""
