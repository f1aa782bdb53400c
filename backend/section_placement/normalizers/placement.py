from section_placement.domain.policy import as_group, as_kind
from section_placement.domain.types import DragItem, DropZone, ReorderOperation

from .errors import PayloadError
from .section import denormalize_section, require


def _index(data, field):
    value = require(data, field)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise PayloadError(f"'{field}' must be a non-negative integer")
    return value


def denormalize_drag_item(data):
    section = data.get("section") if isinstance(data, dict) else None

    return DragItem(
        id=str(require(data, "id")),
        kind=as_kind(require(data, "type")),
        group_id=as_group(require(data, "groupId")),
        index=_index(data, "index"),
        section=denormalize_section(section) if section else None,
    )


def denormalize_drop_zone(data):
    if data is None:
        return None

    max_items = data.get("maxItems") if isinstance(data, dict) else None
    if max_items is not None and (isinstance(max_items, bool) or not isinstance(max_items, int) or max_items < 1):
        raise PayloadError("'maxItems' must be a positive integer")

    return DropZone(
        group_id=as_group(require(data, "groupId")),
        index=_index(data, "index"),
        accepts=tuple(as_kind(kind) for kind in data.get("accepts") or ()),
        max_items=max_items,
    )


def denormalize_operation(data):
    return ReorderOperation(
        section_id=str(require(data, "sectionId")),
        from_group=as_group(require(data, "fromGroup")),
        to_group=as_group(require(data, "toGroup")),
        from_index=_index(data, "fromIndex"),
        to_index=_index(data, "toIndex"),
    )


def normalize_validation_result(result):
    data = {"isValid": result.is_valid}

    if result.reason is not None:
        data["reason"] = result.reason
    if result.suggested_action is not None:
        data["suggestedAction"] = result.suggested_action

    return data


def normalize_restrictions(restrictions):
    return {
        "canReceiveFrom": [g.value for g in restrictions.can_receive_from],
        "canMoveTo": [g.value for g in restrictions.can_move_to],
        "allowedTypes": [k.value for k in restrictions.allowed_types],
        "fixedOrder": (
            [k.value for k in restrictions.fixed_order]
            if restrictions.fixed_order is not None else None
        ),
        "maxItems": restrictions.max_items,
    }


def normalize_policy(table):
    return {group.value: normalize_restrictions(r) for group, r in table.items()}
