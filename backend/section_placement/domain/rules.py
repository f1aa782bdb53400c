"""
Placement rules.

Pure predicates over the group policy table. "Not allowed" is a normal
return value; only values outside the closed GroupId / SectionKind
enumerations raise.
"""
import logging
from typing import Optional, Sequence

from .policy import (
    CONTAINER_KINDS,
    NON_NESTABLE_KINDS,
    STRUCTURAL_KINDS,
    as_group,
    as_kind,
    restrictions_for,
)
from .types import DragItem, DropDecision, DropZone, GroupId, SectionKind

logger = logging.getLogger(__name__)


def can_move_to_group(source: GroupId, target: GroupId) -> bool:
    """Check if a section can be moved from one group to another."""
    source, target = as_group(source), as_group(target)

    if source == target:
        return True

    return target in restrictions_for(source).can_move_to


def can_group_receive_type(group: GroupId, kind: SectionKind) -> bool:
    """Check if a group accepts a section type."""
    restrictions = restrictions_for(group)
    kind = as_kind(kind)

    if not restrictions.allowed_types:
        return kind not in STRUCTURAL_KINDS

    return kind in restrictions.allowed_types


def _fixed_position(fixed_order, kind) -> int:
    # -1 marks a kind with no fixed position
    try:
        return fixed_order.index(kind)
    except ValueError:
        return -1


def validate_fixed_order(
    group: GroupId,
    kind: SectionKind,
    target_index: int,
    current_sections: Sequence,
) -> bool:
    """
    Check that placing `kind` at `target_index` keeps the group's fixed order.

    Sections before the target may not be ordered after `kind`; sections at or
    after the target may not be ordered before it. Unordered kinds are free.
    """
    fixed_order = restrictions_for(group).fixed_order
    kind = as_kind(kind)

    if not fixed_order:
        return True

    position = _fixed_position(fixed_order, kind)
    if position == -1:
        return True

    for section in current_sections[:max(target_index, 0)]:
        if _fixed_position(fixed_order, section.kind) > position:
            return False

    for section in current_sections[max(target_index, 0):]:
        other = _fixed_position(fixed_order, section.kind)
        if other != -1 and other < position:
            return False

    return True


def can_nest_section(parent_kind: SectionKind, child_kind: SectionKind) -> bool:
    parent_kind, child_kind = as_kind(parent_kind), as_kind(child_kind)

    if child_kind in NON_NESTABLE_KINDS:
        return False

    return parent_kind in CONTAINER_KINDS


def are_sibling_types(kind_a: SectionKind, kind_b: SectionKind, group: GroupId) -> bool:
    """Check if two section types can be freely reordered against each other."""
    if not can_group_receive_type(group, kind_a) or not can_group_receive_type(group, kind_b):
        return False

    fixed_order = restrictions_for(group).fixed_order or ()
    # Two fixed-order kinds keep their relative order
    if as_kind(kind_a) in fixed_order and as_kind(kind_b) in fixed_order:
        return False

    return True


def validate_drop(drag_item: DragItem, drop_zone: Optional[DropZone]) -> DropDecision:
    """Master single-move check. The first failing rule wins."""
    if drop_zone is None:
        return DropDecision(valid=False, reason="No valid drop zone")

    source = as_group(drag_item.group_id)
    target = as_group(drop_zone.group_id)

    if not can_move_to_group(source, target):
        logger.debug("Rejected cross-group move %s -> %s for %s", source, target, drag_item.id)
        return DropDecision(
            valid=False,
            reason=f"Cannot move from {source.value} to {target.value}",
        )

    if not can_group_receive_type(target, drag_item.kind):
        kind = as_kind(drag_item.kind)
        logger.debug("Rejected %s in %s for %s", kind, target, drag_item.id)
        return DropDecision(
            valid=False,
            reason=f"{target.value} does not accept {kind.value} sections",
        )

    if source == target and drag_item.index == drop_zone.index:
        return DropDecision(valid=False, reason="Cannot drop on itself")

    return DropDecision(valid=True)
