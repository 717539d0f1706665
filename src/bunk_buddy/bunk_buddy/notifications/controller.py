from __future__ import annotations

from flask import Flask

from ..common.http import current_user_id, json_body, no_content, not_found, ok, pick
from ..container import Container

NOTIFICATION_FIELDS = ("title", "message", "type", "read", "related_entity_id", "related_entity_type")


def register(app: Flask, container: Container) -> None:
    svc = container.notification_service

    @app.route("/api/notifications", methods=["GET"], endpoint="list_notifications")
    def list_notifications():
        return ok(svc.list_for_user(current_user_id()))

    @app.route("/api/notifications/unread", methods=["GET"], endpoint="unread_notifications")
    def unread_notifications():
        return ok(svc.unread(current_user_id()))

    @app.route("/api/notifications", methods=["POST"], endpoint="create_notification")
    def create_notification():
        payload = pick(json_body(), NOTIFICATION_FIELDS)
        notification = svc.notify(
            user_id=current_user_id(),
            title=payload.pop("title", None),
            message=payload.pop("message", None),
            type=payload.pop("type", None),
            **payload,
        )
        return ok(notification, 201)

    @app.route("/api/notifications/read-all", methods=["PUT"], endpoint="read_all_notifications")
    def read_all_notifications():
        return ok({"marked": svc.mark_all_read(current_user_id())})

    @app.route("/api/notifications/<notification_id>/read", methods=["PUT"], endpoint="read_notification")
    def read_notification(notification_id: str):
        if not svc.mark_read(notification_id):
            return not_found("Notification")
        return no_content()
