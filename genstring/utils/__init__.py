"""Utility helpers for GenString."""

from .observability import assert_determinism_equivalence, consolidated_report, determinism_signature  # noqa: F401
from .rng_manager import RNGManager  # noqa: F401
from .validation import ValidationError  # noqa: F401

__all__ = [
    'RNGManager',
    'ValidationError',
    'consolidated_report',
    'determinism_signature',
    'assert_determinism_equivalence',
]
