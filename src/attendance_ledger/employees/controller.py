from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, require_field
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/employees", methods=["POST"], endpoint="add_employee")
    def add_employee():
        data = json_body()
        employee = container.employee_service.add_employee(
            require_field(data, "employee_id"),
            require_field(data, "name"),
            require_field(data, "role"),
        )
        return jsonify(employee.to_dict()), 201

    @app.route("/employees/<int:employee_id>", methods=["PUT"], endpoint="update_employee")
    def update_employee(employee_id: int):
        data = json_body()
        employee = container.employee_service.update_employee(
            employee_id,
            require_field(data, "name"),
            require_field(data, "role"),
        )
        return jsonify(employee.to_dict())

    @app.route("/employees/<int:employee_id>", methods=["GET"], endpoint="get_employee")
    def get_employee(employee_id: int):
        employee = container.employee_service.get_employee(employee_id)
        return jsonify(employee.to_dict())
