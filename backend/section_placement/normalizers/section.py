from section_placement.domain.policy import as_group, as_kind
from section_placement.domain.types import Section

from .errors import PayloadError


def require(data, field):
    if not isinstance(data, dict):
        raise PayloadError(f"Expected an object, got {type(data).__name__}")
    if field not in data or data[field] is None:
        raise PayloadError(f"'{field}' is required")
    return data[field]


def denormalize_section(data):
    return Section(
        id=str(require(data, "id")),
        kind=as_kind(require(data, "type")),
        visible=data.get("visible", True) is not False,
        name=data.get("name", ""),
        settings=data.get("settings") or {},
        sort_order=data["sortOrder"] if isinstance(data.get("sortOrder"), int) else 0,
    )


def denormalize_section_lists(data):
    if not isinstance(data, dict):
        raise PayloadError("'sections' must map group ids to section lists")

    lists = {}
    for group, items in data.items():
        if not isinstance(items, list):
            raise PayloadError(f"Sections for {group} must be a list")
        lists[as_group(group)] = [denormalize_section(item) for item in items]
    return lists


def normalize_section(section, include_settings=False):
    data = {
        "id": section.id,
        "type": section.kind.value,
        "visible": section.visible,
        "sortOrder": section.sort_order,
    }

    if section.name:
        data["name"] = section.name

    if include_settings:
        data["settings"] = section.settings or {}

    return data


def normalize_section_lists(lists, include_settings=False):
    return {
        group.value: [normalize_section(s, include_settings=include_settings) for s in sections]
        for group, sections in lists.items()
    }
