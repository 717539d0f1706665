from __future__ import annotations

from flask import Flask

from ..common.http import current_user_id, json_body, no_content, not_found, ok, pick, query_int
from ..container import Container
from ..core.constants import DEFAULT_UPCOMING_LIMIT

EVENT_FIELDS = ("title", "description", "date", "type", "subject_id", "priority", "completed")


def register(app: Flask, container: Container) -> None:
    svc = container.event_service

    @app.route("/api/events", methods=["GET"], endpoint="list_events")
    def list_events():
        return ok(svc.list_for_user(current_user_id()))

    @app.route("/api/events/upcoming", methods=["GET"], endpoint="upcoming_events")
    def upcoming_events():
        limit = query_int("limit", DEFAULT_UPCOMING_LIMIT)
        return ok(svc.upcoming(current_user_id(), limit=limit))

    @app.route("/api/events", methods=["POST"], endpoint="create_event")
    def create_event():
        payload = pick(json_body(), EVENT_FIELDS)
        event = svc.create(
            user_id=current_user_id(),
            title=payload.pop("title", None),
            date=payload.pop("date", None),
            type=payload.pop("type", None),
            **payload,
        )
        return ok(event, 201)

    @app.route("/api/events/<event_id>", methods=["PUT"], endpoint="update_event")
    def update_event(event_id: str):
        event = svc.update(event_id, **pick(json_body(), EVENT_FIELDS))
        if not event:
            return not_found("Event")
        return ok(event)

    @app.route("/api/events/<event_id>", methods=["DELETE"], endpoint="delete_event")
    def delete_event(event_id: str):
        if not svc.delete(event_id):
            return not_found("Event")
        return no_content()
