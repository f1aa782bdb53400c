"""
Group policy table.

Single source of truth for what is structurally legal in the page builder.
Rules and validators read from GROUP_RESTRICTIONS and never hard-code
group-specific knowledge; changing a business rule means editing this table.
"""
from types import MappingProxyType
from typing import Mapping

from .exceptions import PolicyTableError, UnknownGroupError, UnknownSectionKindError
from .types import GroupId, GroupRestrictions, SectionKind


# Kinds owned exclusively by the header, footer and aside groups.
# The template group accepts every other kind.
STRUCTURAL_KINDS = frozenset({
    SectionKind.HEADER,
    SectionKind.ANNOUNCEMENT_BAR,
    SectionKind.FOOTER,
    SectionKind.CART_DRAWER,
    SectionKind.SEARCH_DRAWER,
})

# Kinds that may hold nested sections, and kinds that may never be nested.
CONTAINER_KINDS = frozenset({
    SectionKind.IMAGE_WITH_TEXT,
    SectionKind.PRODUCT_GRID,
})

NON_NESTABLE_KINDS = frozenset({
    SectionKind.HEADER,
    SectionKind.FOOTER,
    SectionKind.ANNOUNCEMENT_BAR,
    SectionKind.CART_DRAWER,
})


GROUP_RESTRICTIONS: Mapping[GroupId, GroupRestrictions] = MappingProxyType({
    GroupId.HEADER_GROUP: GroupRestrictions(
        can_receive_from=(GroupId.HEADER_GROUP,),
        can_move_to=(GroupId.HEADER_GROUP,),
        allowed_types=(
            SectionKind.ANNOUNCEMENT_BAR,
            SectionKind.HEADER,
            SectionKind.IMAGE_BANNER,
        ),
        # Announcement bar always sits above the header
        fixed_order=(SectionKind.ANNOUNCEMENT_BAR, SectionKind.HEADER),
    ),
    GroupId.ASIDE_GROUP: GroupRestrictions(
        can_receive_from=(GroupId.ASIDE_GROUP,),
        can_move_to=(GroupId.ASIDE_GROUP,),
        allowed_types=(SectionKind.CART_DRAWER, SectionKind.SEARCH_DRAWER),
    ),
    GroupId.TEMPLATE: GroupRestrictions(
        can_receive_from=(GroupId.TEMPLATE,),
        can_move_to=(GroupId.TEMPLATE,),
        allowed_types=(),
    ),
    GroupId.FOOTER_GROUP: GroupRestrictions(
        can_receive_from=(GroupId.FOOTER_GROUP,),
        can_move_to=(GroupId.FOOTER_GROUP,),
        allowed_types=(SectionKind.FOOTER,),
    ),
})


def as_group(value) -> GroupId:
    try:
        return GroupId(value)
    except ValueError:
        raise UnknownGroupError(value) from None


def as_kind(value) -> SectionKind:
    try:
        return SectionKind(value)
    except ValueError:
        raise UnknownSectionKindError(value) from None


def restrictions_for(group) -> GroupRestrictions:
    return GROUP_RESTRICTIONS[as_group(group)]


def assert_policy_table(table: Mapping[GroupId, GroupRestrictions]) -> None:
    """
    Validate the policy table once, at import time.

    Checks:
    - Every GroupId has exactly one entry
    - Group references resolve to GroupIds
    - Kind references resolve to SectionKinds
    - fixed_order kinds are accepted by a closed allowed_types list
    - max_items is a positive integer when present
    """
    missing = [group.value for group in GroupId if group not in table]
    if missing:
        raise PolicyTableError(f"No restrictions defined for groups: {missing}")

    for group, restrictions in table.items():
        if not isinstance(group, GroupId):
            raise PolicyTableError(f"Unknown group in policy table: {group!r}")

        for target in (*restrictions.can_move_to, *restrictions.can_receive_from):
            if not isinstance(target, GroupId):
                raise PolicyTableError(
                    f"{group.value} references unknown group {target!r}"
                )

        fixed_order = restrictions.fixed_order or ()
        for kind in (*restrictions.allowed_types, *fixed_order):
            if not isinstance(kind, SectionKind):
                raise PolicyTableError(
                    f"{group.value} references unknown section type {kind!r}"
                )

        if restrictions.allowed_types:
            stray = [k.value for k in fixed_order if k not in restrictions.allowed_types]
            if stray:
                raise PolicyTableError(
                    f"{group.value} fixes the order of types it does not accept: {stray}"
                )
        elif any(kind in STRUCTURAL_KINDS for kind in fixed_order):
            raise PolicyTableError(
                f"{group.value} fixes the order of structural types it does not accept"
            )

        if restrictions.max_items is not None and (
            not isinstance(restrictions.max_items, int) or restrictions.max_items < 1
        ):
            raise PolicyTableError(
                f"{group.value} max_items must be a positive integer, got {restrictions.max_items!r}"
            )


assert_policy_table(GROUP_RESTRICTIONS)
