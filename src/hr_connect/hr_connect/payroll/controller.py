from __future__ import annotations

from dataclasses import asdict

from flask import Flask, jsonify, request

from ..core.exceptions import DomainError
from ..container import Container
from .calculator.standard_calculator import overtime_breakdown


def register(app: Flask, container: Container) -> None:
    def _number(data: dict, key: str, default=None):
        value = data.get(key, default)
        if value is None:
            return None
        return float(value)

    @app.route("/api/payroll/overtime", methods=["POST"], endpoint="api_payroll_overtime")
    def api_payroll_overtime():
        """OT pay from explicit figures; missing config figures use system config."""
        data = request.get_json(silent=True) or {}
        config = container.config_service.load()
        try:
            result = overtime_breakdown(
                _number(data, "base_salary", 0),
                _number(data, "standard_work_days", config.standard_work_days),
                _number(data, "work_hours_per_day", config.work_hours_per_day),
                _number(data, "ot_hours", 0),
                _number(data, "overtime_rate", config.overtime_rate),
            )
        except DomainError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except (TypeError, ValueError):
            return jsonify({"success": False, "message": "Dữ liệu lương không hợp lệ"}), 400
        return jsonify({"success": True, "data": asdict(result)})

    @app.route("/api/payroll/calculate", methods=["POST"], endpoint="api_payroll_calculate")
    def api_payroll_calculate():
        data = request.get_json(silent=True) or {}
        try:
            record = container.payroll_service.calculate(
                user_id=int(data.get("user_id") or 0),
                base_salary=_number(data, "base_salary", 0),
                month=str(data.get("month") or ""),
                actual_work_days=_number(data, "actual_work_days"),
                ot_hours=_number(data, "ot_hours"),
                allowance=_number(data, "allowance", 0),
                bonus=_number(data, "bonus", 0),
            )
        except DomainError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except (TypeError, ValueError):
            return jsonify({"success": False, "message": "Dữ liệu lương không hợp lệ"}), 400
        return jsonify({"success": True, "data": asdict(record)})
