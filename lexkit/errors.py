#!/usr/bin/env python3
"""
Errors
======
Exceptions for precondition violations.

Ordinary failures (no matching rule, a rejected word) are returned as values
and never raised.
"""


class LexkitError(ValueError):
    """Base class for lexkit errors."""


class InventoryError(LexkitError):
    """A phonotactic inventory cannot be sampled from."""


class LanguageError(LexkitError):
    """A language snapshot is malformed or lacks a requested lect."""
