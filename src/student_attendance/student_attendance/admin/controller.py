from __future__ import annotations

import logging
from functools import wraps
from typing import Optional

from flask import Flask, jsonify, session

from ..core.enums import Role
from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def admin_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "user_id" not in session:
                return jsonify({"error": "Authentication required"}), 401
            if session.get("role") != Role.ADMIN.value:
                return jsonify({"error": "Admin access required"}), 403
            return view(*args, **kwargs)

        return wrapper

    def _current_admin_id() -> Optional[int]:
        # Tracking only: a malformed session id must not block the decision.
        try:
            return int(session["user_id"])
        except (KeyError, TypeError, ValueError):
            return None

    def _process(request_id: int, approve: bool):
        try:
            req = container.admin_service.process_unlock_request(
                int(request_id),
                approve,
                admin_user_id=_current_admin_id(),
            )
        except NotFoundError as e:
            return jsonify({"error": str(e)}), 404
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except Exception:
            logger.exception("Failed to process unlock request %s", request_id)
            return jsonify({"error": "Internal error while processing unlock request"}), 500
        return jsonify(req.to_dict())

    @app.route("/api/admin/dashboard", methods=["GET"], endpoint="admin_dashboard")
    @admin_required
    def admin_dashboard():
        return jsonify(container.admin_service.get_admin_dashboard().to_dict())

    @app.route("/api/admin/unlock-requests", methods=["GET"], endpoint="admin_unlock_requests")
    @admin_required
    def admin_unlock_requests():
        return jsonify([r.to_dict() for r in container.admin_service.get_all_unlock_requests()])

    @app.route("/api/admin/unlock-requests/pending", methods=["GET"], endpoint="admin_pending_unlock_requests")
    @admin_required
    def admin_pending_unlock_requests():
        return jsonify([r.to_dict() for r in container.admin_service.get_pending_unlock_requests()])

    @app.route("/api/admin/unlock-requests/stats", methods=["GET"], endpoint="admin_unlock_stats")
    @admin_required
    def admin_unlock_stats():
        return jsonify(container.admin_service.get_unlock_stats().to_dict())

    @app.route(
        "/api/admin/unlock-requests/<int:request_id>/approve",
        methods=["POST"],
        endpoint="approve_unlock_request",
    )
    @admin_required
    def approve_unlock_request(request_id: int):
        return _process(request_id, True)

    @app.route(
        "/api/admin/unlock-requests/<int:request_id>/reject",
        methods=["POST"],
        endpoint="reject_unlock_request",
    )
    @admin_required
    def reject_unlock_request(request_id: int):
        return _process(request_id, False)

    @app.route("/api/admin/reports/attendance", methods=["GET"], endpoint="admin_attendance_reports")
    @admin_required
    def admin_attendance_reports():
        return jsonify([r.to_dict() for r in container.admin_service.get_attendance_reports()])
