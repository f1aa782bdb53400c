"""
Tests for section_placement/domain/rules.py
"""

import itertools

import pytest

from section_placement.domain.exceptions import UnknownGroupError, UnknownSectionKindError
from section_placement.domain.policy import STRUCTURAL_KINDS, restrictions_for
from section_placement.domain.rules import (
    are_sibling_types,
    can_group_receive_type,
    can_move_to_group,
    can_nest_section,
    validate_drop,
    validate_fixed_order,
)
from section_placement.domain.types import DragItem, DropZone, GroupId, SectionKind


def drag(kind, group, index=0, item_id="dragged"):
    return DragItem(id=item_id, kind=kind, group_id=group, index=index)


class TestCanMoveToGroup:
    """Group-to-group movement."""

    @pytest.mark.parametrize("group", list(GroupId))
    def test_same_group_is_always_allowed(self, group):
        assert can_move_to_group(group, group) is True

    @pytest.mark.parametrize("source,target", [
        (a, b) for a, b in itertools.permutations(GroupId, 2)
    ])
    def test_cross_group_moves_are_disallowed(self, source, target):
        assert can_move_to_group(source, target) is False

    def test_cross_group_allowed_when_listed(self, override_restrictions):
        override_restrictions(GroupId.ASIDE_GROUP, can_move_to=(GroupId.ASIDE_GROUP, GroupId.TEMPLATE))

        assert can_move_to_group(GroupId.ASIDE_GROUP, GroupId.TEMPLATE) is True
        assert can_move_to_group(GroupId.TEMPLATE, GroupId.ASIDE_GROUP) is False

    def test_unknown_group_raises(self):
        with pytest.raises(UnknownGroupError):
            can_move_to_group("sidebar", GroupId.TEMPLATE)


class TestCanGroupReceiveType:
    """allowed_types membership."""

    def test_reflexive_for_accepted_kinds(self):
        for group in GroupId:
            for kind in SectionKind:
                if can_group_receive_type(group, kind):
                    assert can_move_to_group(group, group)

    @pytest.mark.parametrize("group", [GroupId.HEADER_GROUP, GroupId.ASIDE_GROUP, GroupId.FOOTER_GROUP])
    def test_closed_groups_accept_exactly_their_list(self, group):
        allowed = restrictions_for(group).allowed_types
        for kind in SectionKind:
            assert can_group_receive_type(group, kind) is (kind in allowed)

    def test_template_accepts_everything_but_structural_kinds(self):
        for kind in SectionKind:
            assert can_group_receive_type(GroupId.TEMPLATE, kind) is (kind not in STRUCTURAL_KINDS)

    def test_template_rejects_cart_drawer(self):
        assert can_group_receive_type(GroupId.TEMPLATE, SectionKind.CART_DRAWER) is False

    def test_image_banner_is_welcome_in_header_and_template(self):
        assert can_group_receive_type(GroupId.HEADER_GROUP, SectionKind.IMAGE_BANNER)
        assert can_group_receive_type(GroupId.TEMPLATE, SectionKind.IMAGE_BANNER)

    def test_wire_strings_are_accepted(self):
        assert can_group_receive_type("footerGroup", "footer") is True

    def test_unknown_kind_raises(self):
        with pytest.raises(UnknownSectionKindError):
            can_group_receive_type(GroupId.TEMPLATE, "marquee")


class TestValidateFixedOrder:
    """Relative order of fixed-order kinds."""

    @pytest.fixture
    def ordered_template(self, override_restrictions):
        return override_restrictions(
            GroupId.TEMPLATE,
            fixed_order=(SectionKind.SLIDESHOW, SectionKind.RICH_TEXT, SectionKind.FAQ),
        )

    @pytest.fixture
    def abc(self, make_section):
        return [
            make_section(SectionKind.SLIDESHOW),
            make_section(SectionKind.RICH_TEXT),
            make_section(SectionKind.FAQ),
        ]

    def test_middle_kind_in_middle_is_valid(self, ordered_template, abc):
        assert validate_fixed_order(GroupId.TEMPLATE, SectionKind.RICH_TEXT, 1, abc) is True

    def test_first_kind_after_last_is_invalid(self, ordered_template, abc):
        assert validate_fixed_order(GroupId.TEMPLATE, SectionKind.SLIDESHOW, 3, abc) is False

    def test_last_kind_before_first_is_invalid(self, ordered_template, abc):
        assert validate_fixed_order(GroupId.TEMPLATE, SectionKind.FAQ, 0, abc) is False

    def test_unordered_kind_is_free_anywhere(self, ordered_template, abc):
        for index in range(len(abc) + 1):
            assert validate_fixed_order(GroupId.TEMPLATE, SectionKind.GALLERY, index, abc) is True

    def test_unordered_neighbours_impose_nothing(self, ordered_template, make_section):
        sections = [
            make_section(SectionKind.GALLERY),
            make_section(SectionKind.SLIDESHOW),
            make_section(SectionKind.VIDEOS),
            make_section(SectionKind.FAQ),
        ]

        assert validate_fixed_order(GroupId.TEMPLATE, SectionKind.RICH_TEXT, 2, sections) is True
        assert validate_fixed_order(GroupId.TEMPLATE, SectionKind.RICH_TEXT, 3, sections) is True
        assert validate_fixed_order(GroupId.TEMPLATE, SectionKind.RICH_TEXT, 1, sections) is False

    def test_group_without_fixed_order(self, make_section):
        sections = [make_section(SectionKind.FAQ), make_section(SectionKind.SLIDESHOW)]
        assert validate_fixed_order(GroupId.TEMPLATE, SectionKind.GALLERY, 0, sections) is True

    def test_header_cannot_go_above_announcement_bar(self, page_layout):
        header_group = page_layout[GroupId.HEADER_GROUP]
        assert validate_fixed_order(GroupId.HEADER_GROUP, SectionKind.HEADER, 0, header_group) is False
        assert validate_fixed_order(GroupId.HEADER_GROUP, SectionKind.HEADER, 2, header_group) is True

    def test_empty_group(self):
        assert validate_fixed_order(GroupId.HEADER_GROUP, SectionKind.HEADER, 0, []) is True

    def test_index_past_the_end(self, page_layout):
        header_group = page_layout[GroupId.HEADER_GROUP]
        assert validate_fixed_order(GroupId.HEADER_GROUP, SectionKind.ANNOUNCEMENT_BAR, 10, header_group) is False


class TestCanNestSection:
    """Container nesting."""

    @pytest.mark.parametrize("parent", [SectionKind.IMAGE_WITH_TEXT, SectionKind.PRODUCT_GRID])
    def test_containers_accept_content(self, parent):
        assert can_nest_section(parent, SectionKind.RICH_TEXT) is True

    @pytest.mark.parametrize("child", [
        SectionKind.HEADER,
        SectionKind.FOOTER,
        SectionKind.ANNOUNCEMENT_BAR,
        SectionKind.CART_DRAWER,
    ])
    def test_structural_kinds_never_nest(self, child):
        assert can_nest_section(SectionKind.IMAGE_WITH_TEXT, child) is False

    def test_non_containers_never_accept_children(self):
        for child in SectionKind:
            assert can_nest_section(SectionKind.RICH_TEXT, child) is False


class TestAreSiblingTypes:
    """Free reordering between two kinds."""

    def test_symmetric(self):
        for group in GroupId:
            for a, b in itertools.product(SectionKind, repeat=2):
                assert are_sibling_types(a, b, group) == are_sibling_types(b, a, group)

    def test_fixed_order_pair_is_not_siblings(self):
        assert are_sibling_types(SectionKind.ANNOUNCEMENT_BAR, SectionKind.HEADER, GroupId.HEADER_GROUP) is False

    def test_fixed_and_free_kind_are_siblings(self):
        assert are_sibling_types(SectionKind.HEADER, SectionKind.IMAGE_BANNER, GroupId.HEADER_GROUP) is True

    def test_both_must_be_accepted(self):
        assert are_sibling_types(SectionKind.RICH_TEXT, SectionKind.FOOTER, GroupId.TEMPLATE) is False

    def test_template_content_kinds_are_siblings(self):
        assert are_sibling_types(SectionKind.GALLERY, SectionKind.FAQ, GroupId.TEMPLATE) is True


class TestValidateDrop:
    """Single-move master check."""

    def test_no_drop_zone(self):
        decision = validate_drop(drag(SectionKind.RICH_TEXT, GroupId.TEMPLATE), None)

        assert decision.valid is False
        assert decision.reason == "No valid drop zone"

    def test_header_to_footer_group(self):
        decision = validate_drop(
            drag(SectionKind.HEADER, GroupId.HEADER_GROUP, 0),
            DropZone(group_id=GroupId.FOOTER_GROUP, index=0),
        )

        assert decision.valid is False
        assert "headerGroup" in decision.reason
        assert "footerGroup" in decision.reason
        assert decision.reason == "Cannot move from headerGroup to footerGroup"

    def test_product_grid_within_template(self):
        decision = validate_drop(
            drag(SectionKind.PRODUCT_GRID, GroupId.TEMPLATE, 2),
            DropZone(group_id=GroupId.TEMPLATE, index=0),
        )

        assert decision.valid is True
        assert decision.reason is None

    def test_cart_drawer_into_template(self):
        decision = validate_drop(
            drag(SectionKind.CART_DRAWER, GroupId.TEMPLATE, 1),
            DropZone(group_id=GroupId.TEMPLATE, index=0),
        )

        assert decision.valid is False
        assert decision.reason == "template does not accept cart_drawer sections"

    @pytest.mark.parametrize("group,kind", [
        (GroupId.HEADER_GROUP, SectionKind.HEADER),
        (GroupId.ASIDE_GROUP, SectionKind.SEARCH_DRAWER),
        (GroupId.TEMPLATE, SectionKind.GALLERY),
        (GroupId.FOOTER_GROUP, SectionKind.FOOTER),
    ])
    @pytest.mark.parametrize("index", [0, 3])
    def test_self_drop(self, group, kind, index):
        decision = validate_drop(
            drag(kind, group, index, item_id="anything"),
            DropZone(group_id=group, index=index),
        )

        assert decision.valid is False
        assert decision.reason == "Cannot drop on itself"

    def test_group_check_runs_before_type_check(self):
        decision = validate_drop(
            drag(SectionKind.FOOTER, GroupId.FOOTER_GROUP, 0),
            DropZone(group_id=GroupId.TEMPLATE, index=0),
        )

        assert decision.reason.startswith("Cannot move from")

    def test_unknown_group_in_drop_zone(self):
        with pytest.raises(UnknownGroupError):
            validate_drop(
                drag(SectionKind.FAQ, GroupId.TEMPLATE),
                DropZone(group_id="attic", index=0),
            )
