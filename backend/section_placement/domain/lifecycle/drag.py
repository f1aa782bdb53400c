import logging
from enum import Enum
from typing import Dict, Optional, Set

from ..types import DragItem, DropZone, Section, ValidationResult
from ..validators import is_section_draggable, validate_drag_operation

logger = logging.getLogger(__name__)


class DragState(str, Enum):
    IDLE = "idle"
    DRAGGING = "dragging"
    COMMITTED = "committed"
    CANCELLED = "cancelled"


# Explicit allowed state transitions for one drag gesture
ALLOWED_DRAG_TRANSITIONS: Dict[DragState, Set[DragState]] = {
    DragState.IDLE: {DragState.DRAGGING},
    DragState.DRAGGING: {DragState.COMMITTED, DragState.CANCELLED},
    DragState.COMMITTED: {DragState.IDLE},
    DragState.CANCELLED: {DragState.IDLE},
}


def assert_drag_transition(*, from_state: DragState, to_state: DragState) -> None:
    """
    Guards drag gesture transitions.
    Single source of truth for drag state changes.
    """
    allowed = ALLOWED_DRAG_TRANSITIONS.get(from_state, set())

    if to_state not in allowed:
        raise ValueError(
            f"Illegal drag transition: {from_state.value} → {to_state.value}"
        )


class DragSession:
    """
    Per-gesture state owned by the editor's interaction layer.

    Holds the drag item and the latest validation result for exactly one
    gesture; reset() discards both so nothing leaks into the next gesture.
    """

    def __init__(self):
        self.state = DragState.IDLE
        self.item: Optional[DragItem] = None
        self.drop_zone: Optional[DropZone] = None
        self.result: Optional[ValidationResult] = None

    def _transition(self, to_state: DragState) -> None:
        assert_drag_transition(from_state=self.state, to_state=to_state)
        self.state = to_state

    def start(self, section: Section, group_id, index: int) -> DragItem:
        if not is_section_draggable(section):
            raise ValueError(f"Section {section.id} is hidden and cannot be dragged")

        self._transition(DragState.DRAGGING)
        self.item = DragItem(
            id=section.id,
            kind=section.kind,
            group_id=group_id,
            index=index,
            section=section,
        )
        return self.item

    def hover(self, drop_zone: Optional[DropZone], current_sections) -> ValidationResult:
        if self.state != DragState.DRAGGING:
            raise ValueError(f"Cannot hover while {self.state.value}")

        self.drop_zone = drop_zone
        self.result = validate_drag_operation(self.item, drop_zone, current_sections)
        return self.result

    def drop(self) -> DragState:
        if self.result is not None and self.result.is_valid:
            self._transition(DragState.COMMITTED)
            logger.info("Committed drop of %s into %s[%d]", self.item.id, self.drop_zone.group_id, self.drop_zone.index)
        else:
            self._transition(DragState.CANCELLED)
            logger.debug("Cancelled drop: %s", self.result.reason if self.result else "no drop zone")
        return self.state

    def cancel(self) -> DragState:
        self._transition(DragState.CANCELLED)
        return self.state

    def reset(self) -> None:
        self._transition(DragState.IDLE)
        self.item = None
        self.drop_zone = None
        self.result = None
