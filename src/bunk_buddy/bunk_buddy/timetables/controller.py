from __future__ import annotations

from typing import Optional

from flask import Flask, jsonify, request
from werkzeug.datastructures import FileStorage

from ..common.http import current_user_id, json_body, not_found, ok, pick
from ..container import Container

TIMETABLE_FIELDS = ("name", "schedule", "is_active")


def register(app: Flask, container: Container) -> None:
    svc = container.timetable_service

    @app.route("/api/timetables", methods=["GET"], endpoint="list_timetables")
    def list_timetables():
        return ok(svc.list_for_user(current_user_id()))

    @app.route("/api/timetables/active", methods=["GET"], endpoint="active_timetable")
    def active_timetable():
        # No active timetable is a normal state, so answer null instead of 404.
        return ok(svc.active(current_user_id()))

    @app.route("/api/timetables", methods=["POST"], endpoint="create_timetable")
    def create_timetable():
        payload = pick(json_body(), TIMETABLE_FIELDS)
        timetable = svc.create(
            user_id=current_user_id(),
            name=payload.pop("name", None),
            schedule=payload.pop("schedule", None),
            **payload,
        )
        return ok(timetable, 201)

    @app.route("/api/timetables/<timetable_id>", methods=["PUT"], endpoint="update_timetable")
    def update_timetable(timetable_id: str):
        timetable = svc.update(timetable_id, **pick(json_body(), TIMETABLE_FIELDS))
        if not timetable:
            return not_found("Timetable")
        return ok(timetable)

    @app.route("/api/timetables/upload", methods=["POST"], endpoint="upload_timetable")
    def upload_timetable():
        """Create an active timetable from an uploaded Day,Time,Subject CSV."""
        file: Optional[FileStorage] = request.files.get("file")
        if file is None:
            return jsonify({"message": "No file uploaded"}), 400

        text = file.stream.read().decode("utf-8-sig", errors="replace")
        timetable = svc.import_csv(user_id=current_user_id(), filename=file.filename, text=text)
        return ok(timetable, 201)
