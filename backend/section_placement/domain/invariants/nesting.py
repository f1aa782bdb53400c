from ..rules import can_nest_section
from .exceptions import InvariantViolation


def assert_nesting(parent, children):
    for child in children:
        if not can_nest_section(parent.kind, child.kind):
            raise InvariantViolation(
                f"{child.kind} section {child.id} cannot be nested inside {parent.kind}"
            )
