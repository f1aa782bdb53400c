from ..policy import restrictions_for
from ..rules import can_group_receive_type
from .exceptions import InvariantViolation


def assert_group_types(group_id, sections):
    for section in sections:
        if not can_group_receive_type(group_id, section.kind):
            raise InvariantViolation(
                f"{group_id} cannot hold {section.kind} section {section.id}"
            )


def assert_group_fixed_order(group_id, sections):
    fixed_order = restrictions_for(group_id).fixed_order
    if not fixed_order:
        return

    positions = [fixed_order.index(s.kind) for s in sections if s.kind in fixed_order]
    if positions != sorted(positions):
        kinds = [str(s.kind) for s in sections]
        raise InvariantViolation(
            f"{group_id} sections are out of their fixed order: {kinds}"
        )


def assert_group_size(group_id, sections, max_items=None):
    if max_items is None:
        max_items = restrictions_for(group_id).max_items

    if max_items is not None and len(sections) > max_items:
        raise InvariantViolation(
            f"{group_id} holds {len(sections)} sections, maximum is {max_items}"
        )


def assert_group(group_id, sections):
    assert_group_types(group_id, sections)
    assert_group_fixed_order(group_id, sections)
    assert_group_size(group_id, sections)
