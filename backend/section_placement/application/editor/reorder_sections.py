import logging
from typing import Dict, Iterable, List, Mapping, Sequence

from section_placement.domain.exceptions import PlacementRejected
from section_placement.domain.invariants.page import assert_layout
from section_placement.domain.policy import as_group
from section_placement.domain.types import GroupId, ReorderOperation, Section
from section_placement.domain.validators import validate_batch_reorder
from section_placement.utils.order import compact_order, move_item

from .commit_drop import assert_current_position, normalize_groups

logger = logging.getLogger(__name__)


def apply_batch_reorder(
    *,
    current_sections: Mapping[GroupId, Sequence[Section]],
    operations: Iterable[ReorderOperation],
) -> Dict[GroupId, List[Section]]:
    """
    Apply several moves at once (undo/redo replay, external reorder).

    The whole batch is validated before anything moves; a single illegal
    operation rejects all of them.
    """
    operations = list(operations)

    result = validate_batch_reorder(operations)
    if not result.is_valid:
        raise PlacementRejected(result)

    sections = normalize_groups(current_sections)

    for op in operations:
        group = as_group(op.from_group)
        items = sections.get(group, [])

        assert_current_position(items, op.from_index, op.section_id, group)

        sections[group] = move_item(items, op.from_index, min(op.to_index, len(items) - 1))

    sections = {group: compact_order(items) for group, items in sections.items()}

    assert_layout(sections)

    logger.info("Applied batch reorder of %d operations", len(operations))
    return sections
