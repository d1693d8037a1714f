"""
Shared validation module.

Key Components:
- ValidationRules / is_valid(): declarative constraints and a bool predicate
- ValidationResult: Result container with errors
- Validator: Base class for validators
- Validators: Required, Length, Range, All
- validate() / validate_field(): Convenience functions for validation chains
"""
from .validation_framework import (
    ValidationResult,
    Validator,
    ValidationError,
    ValidationRules,
    RequiredValidator,
    LengthValidator,
    RangeValidator,
    All,
    validate,
    validate_field,
    is_valid,
)

__all__ = [
    'ValidationResult',
    'Validator',
    'ValidationError',
    'ValidationRules',
    'RequiredValidator',
    'LengthValidator',
    'RangeValidator',
    'All',
    'validate',
    'validate_field',
    'is_valid',
]
