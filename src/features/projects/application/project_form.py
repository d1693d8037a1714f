"""
New-project form validation.

Turns the raw text of the form fields into (title, description, people)
or a ValidationResult explaining what is wrong. The rules come from
Settings so they can be tuned without code changes.
"""
from dataclasses import dataclass
from typing import Optional, Tuple

from src.shared.application.validation import ValidationResult, ValidationRules, validate_field


@dataclass(frozen=True)
class ProjectFormInput:
    """Raw field values as typed by the user."""
    title: str
    description: str
    people: str


@dataclass(frozen=True)
class ProjectFormRules:
    title: ValidationRules = ValidationRules(required=True)
    description: ValidationRules = ValidationRules(required=True, min_length=5)
    people: ValidationRules = ValidationRules(required=True, min_value=1, max_value=5)

    @classmethod
    def from_settings(cls, settings) -> "ProjectFormRules":
        return cls(
            title=ValidationRules(
                required=bool(settings.get("title_required", True)),
                max_length=settings.get("title_max_length"),
            ),
            description=ValidationRules(
                required=True,
                min_length=settings.get("description_min_length", 5),
                max_length=settings.get("description_max_length"),
            ),
            people=ValidationRules(
                required=True,
                min_value=settings.get("people_min", 1),
                max_value=settings.get("people_max", 5),
            ),
        )


def _parse_people(raw: str) -> Optional[int]:
    try:
        return int(raw.strip())
    except ValueError:
        return None


def validate_project_input(
    form: ProjectFormInput,
    rules: ProjectFormRules = ProjectFormRules(),
) -> Tuple[ValidationResult, Optional[Tuple[str, str, int]]]:
    """
    Validate every field (all errors are collected, not just the first).

    Returns:
        (result, values) where values is (title, description, people) when
        result is valid, otherwise None
    """
    result = ValidationResult()
    result.merge(validate_field("title", form.title, rules.title))
    result.merge(validate_field("description", form.description, rules.description))

    people = _parse_people(form.people)
    if people is None:
        result.merge(ValidationResult.failure("must be a whole number", "people"))
    else:
        result.merge(validate_field("people", people, rules.people))

    if not result:
        return result, None
    return result, (form.title, form.description, people)
