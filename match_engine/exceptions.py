#!/usr/bin/env python3
"""
Custom exceptions for the matching engine.
"""


class MatchEngineError(Exception):
    """Base exception for matching engine errors."""
    pass


class ConfigurationError(MatchEngineError):
    """Raised when the question or candidate catalog is malformed."""
    pass


class DimensionMismatchError(MatchEngineError):
    """Raised when vectors built from different feature spaces are compared."""
    pass
