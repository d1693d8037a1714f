"""
Shared module containing cross-cutting concerns.

Structure:
    shared/
        application/
            validation/     - Validation framework for inputs/forms

Usage:
    from src.shared.application.validation import ValidationRules, validate_field
"""
