from __future__ import annotations

from flask import Flask

from ..common.http import current_user_id, json_body, no_content, not_found, ok, pick
from ..common.serialization import to_primitive
from ..container import Container


def register(app: Flask, container: Container) -> None:
    svc = container.group_service

    @app.route("/api/groups", methods=["GET"], endpoint="list_groups")
    def list_groups():
        return ok(svc.list_for_user(current_user_id()))

    @app.route("/api/groups", methods=["POST"], endpoint="create_group")
    def create_group():
        payload = json_body()
        group = svc.create(
            created_by=current_user_id(),
            name=payload.get("name"),
            description=payload.get("description"),
        )
        return ok(group, 201)

    @app.route("/api/groups/<group_id>", methods=["GET"], endpoint="get_group")
    def get_group(group_id: str):
        group = svc.get(group_id)
        if not group:
            return not_found("Group")
        return ok(group)

    @app.route("/api/groups/<group_id>", methods=["PUT"], endpoint="update_group")
    def update_group(group_id: str):
        group = svc.update(group_id, **pick(json_body(), ("name", "description")))
        if not group:
            return not_found("Group")
        return ok(group)

    @app.route("/api/groups/join", methods=["POST"], endpoint="join_group")
    def join_group():
        member = svc.join_by_code(user_id=current_user_id(), code=json_body().get("code"))
        if not member:
            return not_found("Group")
        return ok(member, 201)

    @app.route("/api/groups/<group_id>/leave", methods=["POST"], endpoint="leave_group")
    def leave_group(group_id: str):
        if not svc.leave(group_id=group_id, user_id=current_user_id()):
            return not_found("Membership")
        return no_content()

    @app.route("/api/groups/<group_id>/members", methods=["GET"], endpoint="group_members")
    def group_members(group_id: str):
        members = svc.members(group_id)
        return ok([{**to_primitive(m.member), "user": to_primitive(m.user)} for m in members])
