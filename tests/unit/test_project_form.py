"""
Tests for new-project form validation.
"""
import pytest

from src.features.projects.application.project_form import (
    ProjectFormInput,
    ProjectFormRules,
    validate_project_input,
)
from src.shared.application.validation import ValidationRules
from src.utils.settings import Settings


def _form(title="Build CLI", description="A command line tool", people="3"):
    return ProjectFormInput(title=title, description=description, people=people)


class TestValidateProjectInput:
    """Tests for validate_project_input."""

    def test_valid_input(self):
        """Test valid input yields parsed values."""
        result, values = validate_project_input(_form())
        assert result.valid
        assert values == ("Build CLI", "A command line tool", 3)

    def test_people_is_trimmed_and_parsed(self):
        """Test surrounding whitespace is stripped from people."""
        _, values = validate_project_input(_form(people=" 5 "))
        assert values[2] == 5

    @pytest.mark.parametrize("form", [
        _form(title=""),
        _form(title="   "),
        _form(description=""),
        _form(description="abcd"),
        _form(people="0"),
        _form(people="6"),
        _form(people=""),
        _form(people="three"),
        _form(people="2.5"),
    ])
    def test_invalid_input_rejected(self, form):
        """Test each invalid field rejects the form."""
        result, values = validate_project_input(form)
        assert not result.valid
        assert values is None

    def test_boundaries_accepted(self):
        """Test boundary values are accepted."""
        assert validate_project_input(_form(description="abcde", people="1"))[0].valid
        assert validate_project_input(_form(people="5"))[0].valid

    def test_all_errors_collected(self):
        """Test every failing field is reported."""
        result, _ = validate_project_input(_form(title="", description="ab", people="9"))
        assert len(result.errors) == 3
        assert any(e.startswith("title:") for e in result.errors)
        assert any(e.startswith("description:") for e in result.errors)
        assert any(e.startswith("people:") for e in result.errors)

    def test_non_numeric_people_message(self):
        """Test the message for a non-numeric headcount."""
        result, _ = validate_project_input(_form(people="lots"))
        assert result.errors == ["people: must be a whole number"]

    def test_custom_rules(self):
        """Test custom rules widen the headcount range."""
        rules = ProjectFormRules(people=ValidationRules(required=True, min_value=1, max_value=10))
        result, values = validate_project_input(_form(people="8"), rules)
        assert result.valid
        assert values[2] == 8


class TestProjectFormRules:
    """Tests for ProjectFormRules.from_settings."""

    def test_from_default_settings(self, settings_file):
        """Test default settings give the default rules."""
        rules = ProjectFormRules.from_settings(Settings(settings_file))
        assert rules == ProjectFormRules(
            title=ValidationRules(required=True),
            description=ValidationRules(required=True, min_length=5),
            people=ValidationRules(required=True, min_value=1, max_value=5),
        )

    def test_from_changed_settings(self, settings_file):
        """Test changed settings flow into the rules."""
        settings = Settings(settings_file)
        settings.set("people_max", 8)
        settings.set("title_max_length", 20)

        rules = ProjectFormRules.from_settings(settings)

        assert rules.people.max_value == 8
        assert rules.title.max_length == 20
        _, values = validate_project_input(_form(people="7"), rules)
        assert values is not None
