"""
Domain models and value objects.

Contains the fixed-width fraction value type.
"""

from src.core.domain.frac import Frac, as_frac

__all__ = [
    "Frac",
    "as_frac",
]
