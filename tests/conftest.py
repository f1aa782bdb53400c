"""
Pytest fixtures shared by the placement test suite.
"""

import itertools
from types import MappingProxyType

import pytest

from section_placement import create_app
from section_placement.domain import policy
from section_placement.domain.types import GroupId, GroupRestrictions, Section, SectionKind


@pytest.fixture
def app():
    return create_app("testing")


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_section():
    """Factory for sections with unique ids."""
    counter = itertools.count(1)

    def _make(kind, section_id=None, **kwargs):
        return Section(id=section_id or f"s{next(counter)}", kind=SectionKind(kind), **kwargs)

    return _make


@pytest.fixture
def page_layout(make_section):
    """A typical page: announcement bar above the header, three body sections."""
    return {
        GroupId.HEADER_GROUP: [
            make_section(SectionKind.ANNOUNCEMENT_BAR, "announcement"),
            make_section(SectionKind.HEADER, "header"),
            make_section(SectionKind.IMAGE_BANNER, "banner"),
        ],
        GroupId.ASIDE_GROUP: [
            make_section(SectionKind.CART_DRAWER, "cart"),
            make_section(SectionKind.SEARCH_DRAWER, "search"),
        ],
        GroupId.TEMPLATE: [
            make_section(SectionKind.SLIDESHOW, "slideshow"),
            make_section(SectionKind.RICH_TEXT, "rich-text"),
            make_section(SectionKind.PRODUCT_GRID, "products"),
        ],
        GroupId.FOOTER_GROUP: [
            make_section(SectionKind.FOOTER, "footer"),
        ],
    }


@pytest.fixture
def override_restrictions(monkeypatch):
    """Replace one group's restrictions for the duration of a test."""

    def _override(group, **changes):
        table = dict(policy.GROUP_RESTRICTIONS)
        current = table[group]
        table[group] = GroupRestrictions(
            can_receive_from=changes.get("can_receive_from", current.can_receive_from),
            can_move_to=changes.get("can_move_to", current.can_move_to),
            allowed_types=changes.get("allowed_types", current.allowed_types),
            fixed_order=changes.get("fixed_order", current.fixed_order),
            max_items=changes.get("max_items", current.max_items),
        )
        policy.assert_policy_table(table)
        monkeypatch.setattr(policy, "GROUP_RESTRICTIONS", MappingProxyType(table))
        return table[group]

    return _override
