from ..policy import as_group
from .exceptions import InvariantViolation
from .group import assert_group


def assert_layout(current_sections):
    """
    Re-validate a whole page layout before it is persisted.

    Every group must satisfy its own restrictions and a section id may
    appear only once across the page.
    """
    seen = set()

    for group_id, sections in current_sections.items():
        group_id = as_group(group_id)
        assert_group(group_id, sections)

        for section in sections:
            if section.id in seen:
                raise InvariantViolation(f"Section {section.id} appears more than once")
            seen.add(section.id)
