"""
Validation Framework

Rule-based checks for user input, used by the new-project form before
anything reaches the ProjectStore.

Usage:
    # Declarative rules -> bool
    rules = ValidationRules(required=True, min_length=5)
    if not is_valid(description, rules):
        ...

    # Same rules, with messages
    result = validate_field("description", description, rules)
    if not result:
        Log.warning("; ".join(result.errors))

    # Composing validators directly
    result = validate(people, All(RequiredValidator(), RangeValidator(1, 5)))

Rule semantics:
- required: fails on None and on values whose text form is blank
- min_length / max_length: only checked for strings
- min_value / max_value: only checked for numbers (bool excluded)
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from numbers import Real
from typing import Any, List, Optional, Union


# =============================================================================
# Exceptions
# =============================================================================

class ValidationError(Exception):
    """
    Raised by ValidationResult.raise_if_invalid() for callers that prefer
    exceptions over result objects.
    """

    def __init__(self, message: str, field_name: Optional[str] = None):
        self.message = message
        self.field_name = field_name
        full_message = f"{field_name}: {message}" if field_name else message
        super().__init__(full_message)


# =============================================================================
# Validation Result
# =============================================================================

@dataclass
class ValidationResult:
    """
    Outcome of one or more checks.

    Attributes:
        valid: True if all validations passed
        errors: Error messages, prefixed with the field name when known
        field_name: Optional field name for context

    Truthy when valid, so `if not result:` reads naturally.
    """
    valid: bool = True
    errors: List[str] = field(default_factory=list)
    field_name: Optional[str] = None

    def add_error(self, message: str) -> None:
        """Add an error and mark as invalid."""
        if self.field_name and not message.startswith(self.field_name):
            message = f"{self.field_name}: {message}"
        self.errors.append(message)
        self.valid = False

    def merge(self, other: 'ValidationResult') -> None:
        """Merge another ValidationResult into this one."""
        if not other.valid:
            self.valid = False
        self.errors.extend(other.errors)

    def __bool__(self) -> bool:
        return self.valid

    def raise_if_invalid(self) -> None:
        """Raise ValidationError if result is invalid."""
        if not self.valid:
            raise ValidationError("; ".join(self.errors), self.field_name)

    @classmethod
    def success(cls) -> 'ValidationResult':
        return cls(valid=True)

    @classmethod
    def failure(cls, message: str, field_name: Optional[str] = None) -> 'ValidationResult':
        result = cls(valid=False, field_name=field_name)
        result.errors.append(f"{field_name}: {message}" if field_name else message)
        return result


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


# =============================================================================
# Validators
# =============================================================================

class Validator(ABC):
    """
    Base class for validators.

    Subclasses implement validate(); instances are also callable.
    """

    @abstractmethod
    def validate(self, value: Any, field_name: str = "") -> ValidationResult:
        """
        Validate a value.

        Args:
            value: The value to validate
            field_name: Optional field name for error messages

        Returns:
            ValidationResult with any errors
        """

    def __call__(self, value: Any, field_name: str = "") -> ValidationResult:
        return self.validate(value, field_name)


class RequiredValidator(Validator):
    """Fails on None and on values whose string form is blank (numbers always pass)."""

    def __init__(self, message: str = "is required"):
        self.message = message

    def validate(self, value: Any, field_name: str = "") -> ValidationResult:
        result = ValidationResult(field_name=field_name)
        if value is None or not str(value).strip():
            result.add_error(self.message)
        return result


class LengthValidator(Validator):
    """
    Checks string length. Non-string values are not this validator's
    concern and pass.
    """

    def __init__(
        self,
        min_length: Optional[int] = None,
        max_length: Optional[int] = None,
        message: Optional[str] = None,
    ):
        self.min_length = min_length
        self.max_length = max_length
        self.message = message

    def validate(self, value: Any, field_name: str = "") -> ValidationResult:
        result = ValidationResult(field_name=field_name)
        if not isinstance(value, str):
            return result

        if self.min_length is not None and len(value) < self.min_length:
            result.add_error(self.message or f"must be at least {self.min_length} characters")
        if self.max_length is not None and len(value) > self.max_length:
            result.add_error(self.message or f"must be at most {self.max_length} characters")
        return result


class RangeValidator(Validator):
    """
    Checks a number against inclusive bounds. Non-numbers pass; pair with
    a type check where that matters.
    """

    def __init__(
        self,
        min_value: Optional[Union[int, float]] = None,
        max_value: Optional[Union[int, float]] = None,
        message: Optional[str] = None,
    ):
        self.min_value = min_value
        self.max_value = max_value
        self.message = message

    def validate(self, value: Any, field_name: str = "") -> ValidationResult:
        result = ValidationResult(field_name=field_name)
        if not _is_number(value):
            return result

        if self.min_value is not None and value < self.min_value:
            result.add_error(self.message or f"must be at least {self.min_value}")
        if self.max_value is not None and value > self.max_value:
            result.add_error(self.message or f"must be at most {self.max_value}")
        return result


class All(Validator):
    """
    AND-composition: valid only if every wrapped validator passes.

    With stop_on_first_error=True, later validators are skipped after the
    first failure.
    """

    def __init__(self, *validators: Validator, stop_on_first_error: bool = False):
        self.validators = validators
        self.stop_on_first_error = stop_on_first_error

    def validate(self, value: Any, field_name: str = "") -> ValidationResult:
        result = ValidationResult(field_name=field_name)
        for validator in self.validators:
            sub_result = validator.validate(value, field_name)
            result.merge(sub_result)
            if self.stop_on_first_error and not sub_result.valid:
                break
        return result


# =============================================================================
# Declarative Rules
# =============================================================================

@dataclass(frozen=True)
class ValidationRules:
    """
    The recognised constraints for one input value.

    Unset (None / False) constraints are not checked.
    """
    required: bool = False
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    min_value: Optional[Union[int, float]] = None
    max_value: Optional[Union[int, float]] = None

    def validators(self) -> List[Validator]:
        """Build the validator chain these rules describe."""
        chain: List[Validator] = []
        if self.required:
            chain.append(RequiredValidator())
        if self.min_length is not None or self.max_length is not None:
            chain.append(LengthValidator(self.min_length, self.max_length))
        if self.min_value is not None or self.max_value is not None:
            chain.append(RangeValidator(self.min_value, self.max_value))
        return chain


# =============================================================================
# Convenience Functions
# =============================================================================

def validate(
    value: Any,
    validators: Union[Validator, List[Validator], ValidationRules],
    field_name: str = "",
) -> ValidationResult:
    """
    Validate a value against a validator, a list of validators, or rules.

    Returns:
        ValidationResult with any errors
    """
    if isinstance(validators, ValidationRules):
        validators = validators.validators()
    if isinstance(validators, Validator):
        return validators.validate(value, field_name)
    return All(*validators).validate(value, field_name)


def validate_field(
    field_name: str,
    value: Any,
    validators: Union[Validator, List[Validator], ValidationRules],
) -> ValidationResult:
    """Same as validate(), field name first for readability."""
    return validate(value, validators, field_name)


def is_valid(value: Any, rules: ValidationRules) -> bool:
    """Predicate form: True when value satisfies every rule."""
    return validate(value, rules).valid
