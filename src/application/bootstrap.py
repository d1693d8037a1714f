"""
Application Bootstrap

Centralized service initialization and dependency injection.
Creates the one ProjectStore (and friends) every view receives.
"""
from typing import Callable, Optional

from src.application.events.event_bus import EventBus
from src.features.projects.application.drag_drop import DragDropController
from src.features.projects.application.project_form import ProjectFormRules
from src.features.projects.application.project_store import ProjectStore
from src.utils.message import Log
from src.utils.settings import Settings


class ServiceContainer:
    """Container for all application services"""

    def __init__(
        self,
        event_bus: EventBus,
        project_store: ProjectStore,
        drag_controller: DragDropController,
        settings: Settings,
    ):
        self.event_bus = event_bus
        self.project_store = project_store
        self.drag_controller = drag_controller
        self.settings = settings

    @property
    def form_rules(self) -> ProjectFormRules:
        return ProjectFormRules.from_settings(self.settings)

    def cleanup(self) -> None:
        """Drop event subscriptions so closed windows are not called back."""
        self.event_bus.clear()
        Log.info("ServiceContainer: Cleaned up")


def initialize_services(
    settings: Optional[Settings] = None,
    id_factory: Optional[Callable[[], str]] = None,
) -> ServiceContainer:
    """
    Wire up the application services.

    Args:
        settings: Settings to use (loaded from the user config dir if None)
        id_factory: Optional project id generator (deterministic ids in tests)

    Returns:
        ServiceContainer holding the shared store and drag controller
    """
    Log.info("Initializing services")
    if settings is None:
        settings = Settings()

    event_bus = EventBus()
    project_store = ProjectStore(event_bus=event_bus, id_factory=id_factory)
    drag_controller = DragDropController(project_store)

    Log.info("Services initialized")
    return ServiceContainer(
        event_bus=event_bus,
        project_store=project_store,
        drag_controller=drag_controller,
        settings=settings,
    )
