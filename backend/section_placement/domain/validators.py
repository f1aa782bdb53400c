"""
Drag operation validators.

Stateful checks built on the placement rules. Callers pass the latest
section lists on every call; nothing here caches between calls.
"""
import logging
from typing import Iterable, List, Mapping, Optional, Sequence

from .policy import as_group, restrictions_for
from .rules import (
    can_group_receive_type,
    can_move_to_group,
    validate_drop,
    validate_fixed_order,
)
from .types import (
    DragItem,
    DropZone,
    GroupId,
    ReorderOperation,
    Section,
    ValidationResult,
)

logger = logging.getLogger(__name__)

SectionLists = Mapping[GroupId, Sequence[Section]]

# Reason prefix -> user facing suggestion, checked in order
SUGGESTED_ACTIONS = (
    ("Cannot move from", "Sections can only be reordered within their own group"),
    ("does not accept", "This section type is not allowed in this area"),
    ("Cannot drop on itself", "Move the section to a different position"),
)
DEFAULT_SUGGESTED_ACTION = "Try dropping in a different location"


def suggest_action(reason: str) -> str:
    for fragment, suggestion in SUGGESTED_ACTIONS:
        if fragment in reason:
            return suggestion
    return DEFAULT_SUGGESTED_ACTION


def sections_in(current_sections: SectionLists, group) -> Sequence[Section]:
    group = as_group(group)
    # Callers may key the mapping by GroupId or by its wire string
    return current_sections.get(group, current_sections.get(group.value, ())) or ()


def validate_drag_operation(
    drag_item: DragItem,
    drop_zone: Optional[DropZone],
    current_sections: SectionLists,
) -> ValidationResult:
    """Validate a candidate move against the current contents of the page."""
    if drop_zone is None:
        return ValidationResult.reject(
            "Invalid drop zone",
            "Drop the section in a valid area",
        )

    decision = validate_drop(drag_item, drop_zone)
    if not decision.valid:
        reason = decision.reason or ""
        return ValidationResult.reject(reason, suggest_action(reason))

    target_sections = sections_in(current_sections, drop_zone.group_id)

    if not validate_fixed_order(drop_zone.group_id, drag_item.kind, drop_zone.index, target_sections):
        logger.debug("Rejected %s at %s[%d]: fixed order", drag_item.id, drop_zone.group_id, drop_zone.index)
        return ValidationResult.reject(
            "This would violate the fixed order of sections",
            "Some sections must maintain a specific order",
        )

    max_items = drop_zone.max_items
    if max_items is None:
        max_items = restrictions_for(drop_zone.group_id).max_items

    if max_items is not None and len(target_sections) >= max_items:
        return ValidationResult.reject(
            f"Maximum {max_items} sections allowed in this group",
            "Remove a section before adding a new one",
        )

    return ValidationResult.ok()


def can_swap_sections(section_a: Section, section_b: Section, group_a: GroupId, group_b: GroupId) -> bool:
    if as_group(group_a) != as_group(group_b):
        return False

    return can_group_receive_type(group_a, section_a.kind) and can_group_receive_type(group_b, section_b.kind)


def validate_batch_reorder(operations: Iterable[ReorderOperation]) -> ValidationResult:
    """All-or-nothing: one illegal operation rejects the whole batch."""
    for op in operations:
        if not can_move_to_group(op.from_group, op.to_group):
            logger.debug("Rejected batch at %s: %s -> %s", op.section_id, op.from_group, op.to_group)
            return ValidationResult.reject(
                f"Cannot move sections between {as_group(op.from_group).value} and {as_group(op.to_group).value}",
                "Reorder sections within their own groups",
            )

    return ValidationResult.ok()


def get_valid_drop_zones(drag_item: DragItem, all_groups: SectionLists) -> List[GroupId]:
    """Every group the dragged item could legally land in."""
    return [
        as_group(group)
        for group in all_groups
        if can_move_to_group(drag_item.group_id, group)
        and can_group_receive_type(group, drag_item.kind)
    ]


def is_section_draggable(section: Section) -> bool:
    # Hidden sections never start a drag
    return section.visible is not False
