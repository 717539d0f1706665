from __future__ import annotations

from flask import Flask

from ..attendance.bunkometer import get_bunkometer_status
from ..common.http import current_user_id, json_body, no_content, not_found, ok, pick
from ..common.serialization import to_primitive
from ..common.validators import require_non_negative_int, require_percentage
from ..container import Container
from ..core.constants import DEFAULT_REQUIRED_PERCENTAGE

SUBJECT_FIELDS = ("name", "total_lectures", "attended_lectures", "required_percentage", "color")


def register(app: Flask, container: Container) -> None:
    svc = container.subject_service

    @app.route("/api/subjects", methods=["GET"], endpoint="list_subjects")
    def list_subjects():
        return ok(svc.list_for_user(current_user_id()))

    @app.route("/api/subjects", methods=["POST"], endpoint="create_subject")
    def create_subject():
        payload = pick(json_body(), SUBJECT_FIELDS)
        subject = svc.create(user_id=current_user_id(), name=payload.pop("name", None), **payload)
        return ok(subject, 201)

    @app.route("/api/subjects/<subject_id>", methods=["PUT"], endpoint="update_subject")
    def update_subject(subject_id: str):
        subject = svc.update(subject_id, **pick(json_body(), SUBJECT_FIELDS))
        if not subject:
            return not_found("Subject")
        return ok(subject)

    @app.route("/api/subjects/<subject_id>", methods=["DELETE"], endpoint="delete_subject")
    def delete_subject(subject_id: str):
        if not svc.delete(subject_id):
            return not_found("Subject")
        return no_content()

    @app.route("/api/subjects/<subject_id>/attendance", methods=["GET"], endpoint="subject_attendance")
    def subject_attendance(subject_id: str):
        subject = svc.get(subject_id)
        if not subject:
            return not_found("Subject")
        return ok(svc.attendance_for(subject))

    @app.route("/api/attendance/calculate", methods=["POST"], endpoint="calculate_attendance")
    def calculate_attendance():
        """Quick calculator: figures for arbitrary counts, nothing is stored."""
        payload = json_body()
        attended = require_non_negative_int(payload.get("attended"), "Attended lectures")
        total = require_non_negative_int(payload.get("total"), "Total lectures")
        required = payload.get("required_percentage", DEFAULT_REQUIRED_PERCENTAGE)
        required = require_percentage(required, "Required percentage")

        calc = svc.calculate(attended, total, required)
        return ok(
            {
                **to_primitive(calc),
                "bunkometer": to_primitive(get_bunkometer_status(calc.current_percentage, required)),
            }
        )
