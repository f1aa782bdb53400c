import logging
from typing import Dict, List, Mapping, Optional, Sequence

from section_placement.domain.exceptions import PlacementRejected, StaleOperationError
from section_placement.domain.invariants.page import assert_layout
from section_placement.domain.policy import as_group
from section_placement.domain.types import DragItem, DropZone, GroupId, Section
from section_placement.domain.validators import validate_drag_operation
from section_placement.utils.order import compact_order, move_item

logger = logging.getLogger(__name__)


def normalize_groups(current_sections: Mapping) -> Dict[GroupId, List[Section]]:
    return {as_group(group): list(sections) for group, sections in current_sections.items()}


def assert_current_position(items: Sequence[Section], index: int, section_id: str, group: GroupId):
    """The section being moved must still sit where the caller saw it."""
    if not 0 <= index < len(items):
        raise StaleOperationError(f"{section_id}: index {index} out of range for {group}")

    if items[index].id != section_id:
        raise StaleOperationError(f"{section_id} is not at {group}[{index}]")


def commit_drop(
    *,
    drag_item: DragItem,
    drop_zone: Optional[DropZone],
    current_sections: Mapping[GroupId, Sequence[Section]],
) -> Dict[GroupId, List[Section]]:
    """
    Apply a validated drop and return the new section lists.

    Responsibilities:
    - Re-validate the move against the latest lists
    - Refuse a drag item whose index no longer matches its section
    - Move within the group and compact sort orders
    - Enforce layout invariants on the result

    The input mapping is never mutated.
    """
    result = validate_drag_operation(drag_item, drop_zone, current_sections)
    if not result.is_valid:
        raise PlacementRejected(result)

    sections = normalize_groups(current_sections)
    group = as_group(drop_zone.group_id)
    target = sections.get(group, [])

    # Only same-group moves survive validation
    assert_current_position(target, drag_item.index, drag_item.id, group)

    to_index = min(drop_zone.index, len(target) - 1)
    sections[group] = compact_order(move_item(target, drag_item.index, to_index))

    # 🔒 Layout invariants
    assert_layout(sections)

    logger.info("Moved %s in %s: %d -> %d", drag_item.id, group, drag_item.index, to_index)
    return sections
