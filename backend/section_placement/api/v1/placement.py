# section_placement/api/v1/placement.py
from flask import current_app, jsonify, request

from section_placement.application.editor.commit_drop import commit_drop
from section_placement.application.editor.reorder_sections import apply_batch_reorder
from section_placement.domain import policy
from section_placement.domain.invariants.exceptions import InvariantViolation
from section_placement.domain.invariants.page import assert_layout
from section_placement.domain.policy import as_group
from section_placement.domain.validators import (
    can_swap_sections,
    get_valid_drop_zones,
    validate_batch_reorder,
    validate_drag_operation,
)
from section_placement.normalizers.errors import PayloadError
from section_placement.normalizers.placement import (
    denormalize_drag_item,
    denormalize_drop_zone,
    denormalize_operation,
    normalize_policy,
    normalize_validation_result,
)
from section_placement.normalizers.section import (
    denormalize_section,
    denormalize_section_lists,
    normalize_section_lists,
    require,
)
from . import v1_bp


def _json_body():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise PayloadError("Request body must be a JSON object")
    return data


# ------------------------
# Policy
# ------------------------

@v1_bp.route("/placement/policy", methods=["GET"])
def get_policy():
    return jsonify(normalize_policy(policy.GROUP_RESTRICTIONS))


# ------------------------
# Drag validation
# ------------------------

@v1_bp.route("/placement/validate-drop", methods=["POST"])
def validate_drop_route():
    data = _json_body()

    drag_item = denormalize_drag_item(require(data, "dragItem"))
    drop_zone = denormalize_drop_zone(data.get("dropZone"))
    sections = denormalize_section_lists(data.get("sections") or {})

    result = validate_drag_operation(drag_item, drop_zone, sections)
    if not result.is_valid:
        current_app.logger.debug(
            "Drop rejected for %s: %s", drag_item.id, result.reason
        )

    return jsonify(normalize_validation_result(result)), 200


@v1_bp.route("/placement/drop-zones", methods=["POST"])
def list_drop_zones():
    data = _json_body()

    drag_item = denormalize_drag_item(require(data, "dragItem"))
    sections = denormalize_section_lists(data.get("sections") or {})

    groups = get_valid_drop_zones(drag_item, sections)

    return jsonify({"groups": [g.value for g in groups]}), 200


@v1_bp.route("/placement/can-swap", methods=["POST"])
def can_swap():
    data = _json_body()

    section_a = denormalize_section(require(data, "sectionA"))
    section_b = denormalize_section(require(data, "sectionB"))
    group_a = as_group(require(data, "groupA"))
    group_b = as_group(require(data, "groupB"))

    return jsonify({
        "canSwap": can_swap_sections(section_a, section_b, group_a, group_b)
    }), 200


# ------------------------
# Commit-time validation
# ------------------------

@v1_bp.route("/placement/validate-batch", methods=["POST"])
def validate_batch():
    data = _json_body()
    operations = require(data, "operations")

    if not isinstance(operations, list):
        raise PayloadError("'operations' must be a list")

    result = validate_batch_reorder([denormalize_operation(op) for op in operations])

    return jsonify(normalize_validation_result(result)), 200


@v1_bp.route("/placement/validate-layout", methods=["POST"])
def validate_layout():
    data = _json_body()
    sections = denormalize_section_lists(require(data, "sections"))

    try:
        assert_layout(sections)
    except InvariantViolation as exc:
        return jsonify({"isValid": False, "reason": str(exc)}), 200

    return jsonify({"isValid": True}), 200


# ------------------------
# Commit
# ------------------------

@v1_bp.route("/placement/commit-drop", methods=["POST"])
def commit_drop_route():
    data = _json_body()

    drag_item = denormalize_drag_item(require(data, "dragItem"))
    drop_zone = denormalize_drop_zone(data.get("dropZone"))
    sections = denormalize_section_lists(require(data, "sections"))

    updated = commit_drop(
        drag_item=drag_item,
        drop_zone=drop_zone,
        current_sections=sections,
    )

    return jsonify({"sections": normalize_section_lists(updated)}), 200


@v1_bp.route("/placement/apply-batch", methods=["POST"])
def apply_batch_route():
    data = _json_body()
    operations = require(data, "operations")

    if not isinstance(operations, list):
        raise PayloadError("'operations' must be a list")

    updated = apply_batch_reorder(
        current_sections=denormalize_section_lists(require(data, "sections")),
        operations=[denormalize_operation(op) for op in operations],
    )

    return jsonify({"sections": normalize_section_lists(updated)}), 200
