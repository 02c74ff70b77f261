from __future__ import annotations

import logging
from datetime import date

from flask import Flask, jsonify, request

from ..core.enums import AttendanceType
from ..core.exceptions import DomainError, ValidationError
from ..geo.distance import GeoPoint
from ..container import Container

logger = logging.getLogger(__name__)

ACTION_MESSAGES = {
    AttendanceType.CHECK_IN: "Chấm công vào thành công",
    AttendanceType.CHECK_OUT: "Chấm công ra thành công",
}


def _parse_online(value) -> bool:
    if value is None:
        return True
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise ValueError(f"online must be a boolean, got {value!r}")


def register(app: Flask, container: Container) -> None:
    def _user_id() -> int:
        try:
            return int(request.args["user_id"])
        except (KeyError, ValueError):
            raise ValidationError("Thiếu tham số user_id") from None

    @app.route("/api/attendance", methods=["POST"], endpoint="api_attendance_record")
    def api_attendance_record():
        """Record a check-in/check-out; the body carries GPS and photo reference."""
        data = request.get_json(silent=True) or {}
        try:
            user_id = int(data.get("user_id") or 0)
            event_type = AttendanceType(data.get("type") or "")
            online = _parse_online(data.get("online"))
            location = None
            if data.get("lat") is not None and data.get("lng") is not None:
                location = GeoPoint(lat=float(data["lat"]), lng=float(data["lng"]))
        except (TypeError, ValueError):
            return jsonify({"success": False, "message": "Dữ liệu chấm công không hợp lệ"}), 400

        try:
            record = container.attendance_service.record(
                user_id,
                event_type,
                location,
                photo_ref=data.get("photo_ref"),
                online=online,
            )
        except DomainError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("Attendance recording failed for user_id=%s", user_id)
            return jsonify({"success": False, "message": "Lỗi khi lưu dữ liệu chấm công"}), 500

        return jsonify({
            "success": True,
            "message": ACTION_MESSAGES[record.type],
            "record": container.attendance_service.to_ui(record),
        }), 201

    @app.route("/api/attendance/history", methods=["GET"], endpoint="api_attendance_history")
    def api_attendance_history():
        try:
            user_id = _user_id()
        except DomainError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        return jsonify({"success": True, "data": container.attendance_service.get_history_ui(user_id)})

    @app.route("/api/attendance/next", methods=["GET"], endpoint="api_attendance_next")
    def api_attendance_next():
        try:
            user_id = _user_id()
        except DomainError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        action = container.attendance_service.next_action(user_id, date.today())
        return jsonify({"success": True, "action": action.value})
