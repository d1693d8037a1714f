"""
Project Store

Single source of truth for the board's projects, with an observer protocol
for the views that render them.

Usage:
    store = ProjectStore(event_bus=event_bus)
    store.subscribe(lambda projects: print(len(projects)))

    project = store.create("Build CLI", "desc long enough", 3)
    store.transition(project.id, ProjectStatus.FINISHED)

Guarantees:
- Projects keep creation order; the store never reorders them
- Subscribers are called in subscription order, once per registration
- Every subscriber receives its own shallow copy of the project list
- A broadcast happens if and only if observable state changed
"""
from typing import Callable, List, Optional

from src.application.events.events import ProjectCreated, ProjectStatusChanged
from src.features.projects.domain.project import Project, ProjectStatus, new_project_id
from src.utils.message import Log


# =============================================================================
# Listener Type
# =============================================================================

ProjectsListener = Callable[[List[Project]], None]


# =============================================================================
# Project Store
# =============================================================================

class ProjectStore:
    """
    Owns the ordered project list and the listener registry.

    One instance is created by the bootstrap and handed to every view.
    Listeners get a snapshot (new list, same Project objects); since
    Project.status has no public setter, the snapshot cannot be used to
    change what the store holds.

    Attributes:
        event_bus: Optional EventBus notified after each broadcast
    """

    def __init__(
        self,
        event_bus=None,
        id_factory: Optional[Callable[[], str]] = None,
    ):
        """
        Initialize an empty store.

        Args:
            event_bus: Optional EventBus for ProjectCreated/ProjectStatusChanged
            id_factory: Callable producing unique ids (uuid4 strings by default)
        """
        self._projects: List[Project] = []
        self._listeners: List[ProjectsListener] = []
        self._event_bus = event_bus
        self._id_factory = id_factory or new_project_id

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    @property
    def projects(self) -> List[Project]:
        """Snapshot of all projects in creation order."""
        return self.snapshot()

    def snapshot(self) -> List[Project]:
        return self._projects.copy()

    def get(self, project_id: str) -> Optional[Project]:
        for project in self._projects:
            if project.id == project_id:
                return project
        return None

    def __len__(self) -> int:
        return len(self._projects)

    # -------------------------------------------------------------------------
    # Subscriptions
    # -------------------------------------------------------------------------

    def subscribe(self, listener: ProjectsListener) -> None:
        """
        Register a listener for future changes.

        The listener is not called now. Registering the same callable twice
        means it is called twice per change.

        Args:
            listener: Called with a list snapshot after every change
        """
        self._listeners.append(listener)

    def unsubscribe(self, listener: ProjectsListener) -> bool:
        """
        Remove one registration of a listener.

        Returns:
            True if a registration was removed
        """
        try:
            self._listeners.remove(listener)
            return True
        except ValueError:
            return False

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def create(self, title: str, description: str, people: int) -> Project:
        """
        Add a new ACTIVE project and broadcast.

        Inputs are expected to be validated by the caller.

        Returns:
            The created Project
        """
        project = Project(
            id=self._id_factory(),
            title=title,
            description=description,
            people=people,
        )
        self._projects.append(project)
        Log.info(f"ProjectStore: Created project '{project.title}' ({project.id})")

        self._broadcast()

        if self._event_bus is not None:
            self._event_bus.publish(ProjectCreated(project_id=project.id, data={"project": project.to_dict()}))
        return project

    def transition(self, project_id: str, new_status: ProjectStatus) -> bool:
        """
        Move a project to another list.

        Unknown ids (e.g. a stale drag payload) and transitions to the
        current status are ignored without a broadcast.

        Args:
            project_id: Id of the project to move
            new_status: Target status

        Returns:
            True if the status changed and listeners were notified
        """
        project = self.get(project_id)
        if project is None:
            Log.debug(f"ProjectStore: Ignoring transition of unknown project '{project_id}'")
            return False
        if project.status == new_status:
            Log.debug(f"ProjectStore: Project '{project.title}' is already {new_status.value}")
            return False

        old_status = project.status
        project._apply_status(new_status)
        Log.info(f"ProjectStore: Moved '{project.title}' from {old_status.value} to {new_status.value}")

        self._broadcast()

        if self._event_bus is not None:
            self._event_bus.publish(ProjectStatusChanged(
                project_id=project.id,
                data={
                    "title": project.title,
                    "old_status": old_status.value,
                    "new_status": new_status.value,
                },
            ))
        return True

    # -------------------------------------------------------------------------
    # Broadcast
    # -------------------------------------------------------------------------

    def _broadcast(self) -> None:
        # Registry copy: a listener may subscribe during the broadcast
        for listener in self._listeners.copy():
            try:
                listener(self._projects.copy())
            except Exception as e:
                name = getattr(listener, '__qualname__', repr(listener))
                Log.error(f"ProjectStore: Error in listener '{name}': {e}")
