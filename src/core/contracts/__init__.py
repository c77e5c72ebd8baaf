"""
Contract Validation Module

JSON Schema контракт сериализованных дробей.
"""

from .validators import (
    FRAC_SCHEMA,
    SCHEMA_DIR,
    FracContract,
    default_contract,
    dump_frac,
    load_frac,
    load_schema,
    validate_frac,
)

__all__ = [
    # Constants
    "SCHEMA_DIR",
    "FRAC_SCHEMA",
    # Classes
    "FracContract",
    # Functions
    "load_schema",
    "default_contract",
    "validate_frac",
    "load_frac",
    "dump_frac",
]
