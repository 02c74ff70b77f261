from __future__ import annotations

from datetime import date, datetime

from flask import Flask, jsonify, request

from ..common.datetime_utils import format_hhmm
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _parse_date(value: str) -> date:
        return datetime.strptime(value, "%Y-%m-%d").date()

    @app.route("/api/shifts", methods=["POST"], endpoint="api_shift_register")
    def api_shift_register():
        data = request.get_json(silent=True) or {}
        try:
            registration_id = container.shift_service.register(
                user_id=int(data.get("user_id") or 0),
                work_date=_parse_date(data.get("date") or ""),
                kind=str(data.get("shift") or ""),
                start_time=data.get("start_time"),
                off_type=data.get("off_type"),
            )
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except ValueError:
            return jsonify({"success": False, "message": "Ngày không hợp lệ"}), 400
        return jsonify({"success": True, "registration_id": registration_id}), 201

    @app.route("/api/shifts/<int:registration_id>/approve", methods=["POST"], endpoint="api_shift_approve")
    def api_shift_approve(registration_id: int):
        try:
            container.shift_service.approve(registration_id=registration_id)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        return jsonify({"success": True})

    @app.route("/api/shifts/<int:registration_id>/reject", methods=["POST"], endpoint="api_shift_reject")
    def api_shift_reject(registration_id: int):
        data = request.get_json(silent=True) or {}
        try:
            container.shift_service.reject(registration_id=registration_id, reason=data.get("reason"))
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        return jsonify({"success": True})

    @app.route("/api/shifts/expected", methods=["GET"], endpoint="api_shift_expected")
    def api_shift_expected():
        try:
            user_id = int(request.args.get("user_id") or 0)
            on_date = _parse_date(request.args.get("date") or date.today().strftime("%Y-%m-%d"))
        except ValueError:
            return jsonify({"success": False, "message": "Tham số không hợp lệ"}), 400

        window = container.shift_service.expected_window_for_date(user_id=user_id, on_date=on_date)
        if window is None:
            return jsonify({"success": True, "window": None})
        return jsonify({
            "success": True,
            "window": {
                "start_minutes": window.start_minutes,
                "end_minutes": window.end_minutes,
                "start": format_hhmm(window.start_minutes),
                "end": format_hhmm(window.end_minutes),
            },
        })
