from flask import current_app, jsonify, request
from section_placement.domain.exceptions import PlacementError, PlacementRejected
from section_placement.domain.invariants.exceptions import InvariantViolation
from section_placement.normalizers.errors import PayloadError
from section_placement.normalizers.placement import normalize_validation_result


def _error(name, message, status):
    response = jsonify({
        "error": name,
        "message": message
    })
    response.status_code = status
    return response


def register_error_handlers(app):
    @app.errorhandler(InvariantViolation)
    def handle_invariant_violation(error):
        return _error("InvariantViolation", str(error), 400)

    @app.errorhandler(PayloadError)
    def handle_payload_error(error):
        current_app.logger.warning("Malformed payload on %s: %s", request.path, error)
        return _error("PayloadError", str(error), 400)

    @app.errorhandler(PlacementRejected)
    def handle_placement_rejected(error):
        response = jsonify({
            "error": "PlacementRejected",
            "message": str(error),
            "result": normalize_validation_result(error.result)
        })
        response.status_code = 409
        return response

    @app.errorhandler(PlacementError)
    def handle_placement_error(error):
        current_app.logger.warning("Rejected input on %s: %s", request.path, error)
        return _error(type(error).__name__, str(error), 400)
