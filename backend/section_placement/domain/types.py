from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class SectionKind(str, Enum):
    # Header group
    ANNOUNCEMENT_BAR = "announcement_bar"
    HEADER = "header"
    IMAGE_BANNER = "image_banner"

    # Aside group
    CART_DRAWER = "cart_drawer"
    SEARCH_DRAWER = "search_drawer"

    # Template sections
    SLIDESHOW = "slideshow"
    MULTICOLUMNS = "multicolumns"
    COLLAGE = "collage"
    IMAGE_WITH_TEXT = "image_with_text"
    GALLERY = "gallery"
    CONTACT_FORM = "contact_form"
    NEWSLETTER = "newsletter"
    FEATURED_PRODUCT = "featured_product"
    FEATURED_COLLECTION = "featured_collection"
    PRODUCT_GRID = "product_grid"
    TESTIMONIALS = "testimonials"
    FAQ = "faq"
    VIDEOS = "videos"
    RICH_TEXT = "rich_text"
    PRODUCT_INFORMATION = "product_information"

    # Room page sections
    ROOM_GALLERY = "room_gallery"
    ROOM_TITLE_HOST = "room_title_host"
    ROOM_HIGHLIGHTS = "room_highlights"
    ROOM_DESCRIPTION = "room_description"
    ROOM_AMENITIES = "room_amenities"
    ROOM_SLEEPING = "room_sleeping"
    ROOM_REVIEWS = "room_reviews"
    ROOM_MAP = "room_map"
    ROOM_CALENDAR = "room_calendar"
    ROOM_HOST_CARD = "room_host_card"
    ROOM_THINGS = "room_things"

    # Footer group
    FOOTER = "footer"

    def __str__(self) -> str:
        return self.value


class GroupId(str, Enum):
    HEADER_GROUP = "headerGroup"
    ASIDE_GROUP = "asideGroup"
    TEMPLATE = "template"
    FOOTER_GROUP = "footerGroup"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Section:
    id: str
    kind: SectionKind
    visible: bool = True
    name: str = ""
    settings: Dict[str, Any] = field(default_factory=dict, compare=False)
    sort_order: int = 0


@dataclass(frozen=True)
class GroupRestrictions:
    can_receive_from: Tuple[GroupId, ...]
    can_move_to: Tuple[GroupId, ...]
    # Empty means "everything except the structural kinds"
    allowed_types: Tuple[SectionKind, ...] = ()
    fixed_order: Optional[Tuple[SectionKind, ...]] = None
    max_items: Optional[int] = None


@dataclass(frozen=True)
class DragItem:
    """A section being relocated. Only valid for the gesture that built it."""

    id: str
    kind: SectionKind
    group_id: GroupId
    index: int
    section: Optional[Section] = None


@dataclass(frozen=True)
class DropZone:
    """A candidate destination under the pointer."""

    group_id: GroupId
    index: int
    # Display hint for the editor; placement is decided by the group policy
    accepts: Tuple[SectionKind, ...] = ()
    max_items: Optional[int] = None


@dataclass(frozen=True)
class DropDecision:
    valid: bool
    reason: Optional[str] = None


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    reason: Optional[str] = None
    suggested_action: Optional[str] = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(is_valid=True)

    @classmethod
    def reject(cls, reason: str, suggested_action: Optional[str] = None) -> "ValidationResult":
        return cls(is_valid=False, reason=reason, suggested_action=suggested_action)


@dataclass(frozen=True)
class ReorderOperation:
    section_id: str
    from_group: GroupId
    to_group: GroupId
    from_index: int
    to_index: int
