from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, require_field
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/attendance", methods=["POST"], endpoint="submit_attendance")
    def submit_attendance():
        data = json_body()
        record = container.attendance_service.submit_attendance(require_field(data, "employee_id"))
        return jsonify(record.to_dict()), 201

    @app.route("/attendance/<int:attendance_id>", methods=["GET"], endpoint="get_attendance")
    def get_attendance(attendance_id: int):
        record = container.attendance_service.get_attendance(attendance_id)
        return jsonify(record.to_dict())
