"""
Drag-and-Drop Status Transitions

Turns "card dragged onto a list" into ProjectStore.transition() calls.
The Qt widgets own the platform events (QDrag, QDragMoveEvent, QDropEvent)
and forward only what matters here: mime types, the id string, and which
source/target is involved.

Lifecycle of one drag:

    IDLE --drag_start--> DRAG_STARTED --drag_over--> DRAG_OVER_TARGET
                                                      |          |
                                           drag_leave |          | drop
                                                      v          v
                                          DRAG_LEFT_TARGET     DROPPED
    any state --drag_end--> IDLE   (all drop markers cleared)

Usage:
    controller = DragDropController(store)
    controller.register_target(active_list)

    payload = controller.drag_start(item)              # source side
    if controller.drag_over(active_list, payload.types):
        event.acceptProposedAction()                   # target side
    controller.drop(active_list, payload.text)
    controller.drag_end()
"""
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, List, Protocol, Sequence, runtime_checkable

from src.features.projects.application.project_store import ProjectStore
from src.features.projects.domain.project import ProjectStatus
from src.utils.message import Log


# The only payload format read or written
TEXT_PLAIN = "text/plain"


class DragEffect(Enum):
    """Allowed drop effect declared by the drag source."""
    MOVE = "move"


class DragState(Enum):
    IDLE = auto()
    DRAG_STARTED = auto()
    DRAG_OVER_TARGET = auto()
    DRAG_LEFT_TARGET = auto()
    DROPPED = auto()


@dataclass(frozen=True)
class DragPayload:
    """Data attached to a drag: mime type -> string, plus the allowed effect."""
    data: Dict[str, str] = field(default_factory=dict)
    effect_allowed: DragEffect = DragEffect.MOVE

    @property
    def types(self) -> List[str]:
        return list(self.data)

    @property
    def text(self) -> str:
        return self.data.get(TEXT_PLAIN, "")


# =============================================================================
# Capability Contracts
# =============================================================================

@runtime_checkable
class DragSource(Protocol):
    """Something that can be dragged: it knows which project it shows."""

    @property
    def project_id(self) -> str:
        ...


@runtime_checkable
class DropTarget(Protocol):
    """A list that accepts dropped projects and moves them to its status."""

    @property
    def target_status(self) -> ProjectStatus:
        ...

    def set_droppable(self, droppable: bool) -> None:
        """Show or hide the 'drop here' highlight."""
        ...

    def is_droppable(self) -> bool:
        ...


def accepts_payload(types: Sequence[str]) -> bool:
    """A drag is accepted only when its first payload type is plain text."""
    return bool(types) and types[0] == TEXT_PLAIN


# =============================================================================
# Controller
# =============================================================================

class DragDropController:
    """
    Drives the drag lifecycle for one board.

    Single-threaded: there is at most one drag in flight, so the
    controller tracks a single state. drop() delegates entirely to the
    store, which ignores stale ids and same-status moves.
    """

    def __init__(self, store: ProjectStore):
        self._store = store
        self._targets: List[DropTarget] = []
        self._state = DragState.IDLE
        self._dragged_id = ""

    @property
    def state(self) -> DragState:
        return self._state

    @property
    def dragged_id(self) -> str:
        """Id attached by the last drag_start() ("" when idle)."""
        return self._dragged_id

    @property
    def targets(self) -> List[DropTarget]:
        return self._targets.copy()

    def register_target(self, target: DropTarget) -> None:
        if target not in self._targets:
            self._targets.append(target)

    def unregister_target(self, target: DropTarget) -> None:
        if target in self._targets:
            self._targets.remove(target)

    # -------------------------------------------------------------------------
    # Source side
    # -------------------------------------------------------------------------

    def drag_start(self, source: DragSource) -> DragPayload:
        """Build the payload for a card being picked up. Does not touch the store."""
        self._dragged_id = source.project_id
        self._state = DragState.DRAG_STARTED
        return DragPayload(data={TEXT_PLAIN: source.project_id}, effect_allowed=DragEffect.MOVE)

    def drag_end(self) -> None:
        """Clear every target's marker, wherever (or whether) the card was dropped."""
        for target in self._targets:
            target.set_droppable(False)
        self._dragged_id = ""
        self._state = DragState.IDLE

    # -------------------------------------------------------------------------
    # Target side
    # -------------------------------------------------------------------------

    def drag_over(self, target: DropTarget, types: Sequence[str]) -> bool:
        """
        Decide whether target accepts the hovering drag.

        Called on every drag-move tick. The caller must accept the platform
        event when this returns True, otherwise no drop will be delivered.
        """
        if not accepts_payload(types):
            return False
        target.set_droppable(True)
        self._state = DragState.DRAG_OVER_TARGET
        return True

    def drag_leave(self, target: DropTarget) -> None:
        target.set_droppable(False)
        if self._state == DragState.DRAG_OVER_TARGET:
            self._state = DragState.DRAG_LEFT_TARGET

    def drop(self, target: DropTarget, project_id: str) -> bool:
        """
        Move the dropped project to target's status.

        Returns:
            True if the project actually changed lists
        """
        self._state = DragState.DROPPED
        Log.debug(f"DragDropController: Drop of '{project_id}' on {target.target_status.value} list")
        return self._store.transition(project_id, target.target_status)
