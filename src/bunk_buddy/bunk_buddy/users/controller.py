from __future__ import annotations

from flask import Flask

from ..common.http import current_user_id, json_body, not_found, ok, pick
from ..container import Container

USER_FIELDS = ("username", "email", "name", "avatar")


def register(app: Flask, container: Container) -> None:
    @app.route("/api/user", methods=["GET"], endpoint="current_user")
    def current_user():
        user = container.user_service.get(current_user_id())
        if not user:
            return not_found("User")
        return ok(user)

    @app.route("/api/user", methods=["PUT"], endpoint="update_current_user")
    def update_current_user():
        payload = pick(json_body(), ("name", "avatar"))
        user = container.user_service.update_profile(current_user_id(), **payload)
        if not user:
            return not_found("User")
        return ok(user)

    @app.route("/api/users", methods=["POST"], endpoint="register_user")
    def register_user():
        payload = pick(json_body(), USER_FIELDS)
        user = container.user_service.register(
            username=payload.get("username"),
            email=payload.get("email"),
            name=payload.get("name"),
            avatar=payload.get("avatar"),
        )
        return ok(user, 201)
