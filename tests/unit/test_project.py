"""
Tests for the Project entity.
"""
import pytest

from src.features.projects.domain.project import Project, ProjectStatus, new_project_id


class TestProjectStatus:
    """Tests for ProjectStatus enum."""

    def test_values(self):
        """Test the status string values."""
        assert ProjectStatus.ACTIVE.value == "active"
        assert ProjectStatus.FINISHED.value == "finished"

    def test_display_name(self):
        """Test upper-case display names."""
        assert ProjectStatus.ACTIVE.display_name == "ACTIVE"
        assert ProjectStatus.FINISHED.display_name == "FINISHED"


class TestProject:
    """Tests for Project entity."""

    def test_new_project_is_active(self):
        """Test new projects start ACTIVE."""
        project = Project(id="p1", title="Build CLI", description="A command line tool", people=3)
        assert project.status == ProjectStatus.ACTIVE

    def test_empty_id_gets_generated(self):
        """Test an empty id is replaced by a generated one."""
        project = Project(id="", title="t", description="desc long", people=1)
        assert project.id
        assert isinstance(project.id, str)

    def test_generated_ids_are_unique(self):
        """Test the default id factory never repeats."""
        assert len({new_project_id() for _ in range(100)}) == 100

    @pytest.mark.parametrize("attr, value", [
        ("id", "other"),
        ("title", "Renamed"),
        ("description", "Another description"),
        ("people", 4),
    ])
    def test_content_is_immutable(self, attr, value):
        """Test identity and content cannot be reassigned."""
        project = Project(id="p1", title="Build CLI", description="A command line tool", people=3)
        with pytest.raises(AttributeError):
            setattr(project, attr, value)

    def test_status_has_no_public_setter(self):
        """Test status is read-only from outside the store."""
        project = Project(id="p1", title="t", description="desc long", people=1)
        with pytest.raises(AttributeError):
            project.status = ProjectStatus.FINISHED
        assert project.status == ProjectStatus.ACTIVE

    def test_apply_status(self):
        """Test the store hook changes status."""
        project = Project(id="p1", title="t", description="desc long", people=1)
        project._apply_status(ProjectStatus.FINISHED)
        assert project.status == ProjectStatus.FINISHED

    def test_persons_label(self):
        """Test singular and plural headcount labels."""
        assert Project(id="a", title="t", description="ddddd", people=1).persons_label == "1 person"
        assert Project(id="b", title="t", description="ddddd", people=3).persons_label == "3 persons"

    def test_to_dict(self):
        """Test dictionary conversion."""
        project = Project(id="p1", title="Build CLI", description="A command line tool", people=3)
        assert project.to_dict() == {
            "id": "p1",
            "title": "Build CLI",
            "description": "A command line tool",
            "people": 3,
            "status": "active",
        }

    def test_identity_equality(self):
        """Test projects compare by identity."""
        a = Project(id="p1", title="t", description="ddddd", people=1)
        b = Project(id="p1", title="t", description="ddddd", people=1)
        assert a == a
        assert a != b
