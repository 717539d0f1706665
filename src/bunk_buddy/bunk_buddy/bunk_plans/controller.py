from __future__ import annotations

from flask import Flask

from ..common.http import current_user_id, json_body, not_found, ok, pick
from ..container import Container

CREATE_FIELDS = ("subject_id", "planned_date", "group_id", "reason", "status")
UPDATE_FIELDS = ("planned_date", "reason", "status")


def register(app: Flask, container: Container) -> None:
    svc = container.bunk_plan_service

    @app.route("/api/bunk-plans", methods=["GET"], endpoint="list_bunk_plans")
    def list_bunk_plans():
        return ok(svc.list_for_user(current_user_id()))

    @app.route("/api/groups/<group_id>/bunk-plans", methods=["GET"], endpoint="group_bunk_plans")
    def group_bunk_plans(group_id: str):
        return ok(svc.list_for_group(group_id))

    @app.route("/api/bunk-plans", methods=["POST"], endpoint="create_bunk_plan")
    def create_bunk_plan():
        payload = pick(json_body(), CREATE_FIELDS)
        plan = svc.create(
            user_id=current_user_id(),
            subject_id=payload.pop("subject_id", None),
            planned_date=payload.pop("planned_date", None),
            **payload,
        )
        return ok(plan, 201)

    @app.route("/api/bunk-plans/<plan_id>", methods=["PUT"], endpoint="update_bunk_plan")
    def update_bunk_plan(plan_id: str):
        plan = svc.update(plan_id, **pick(json_body(), UPDATE_FIELDS))
        if not plan:
            return not_found("Bunk plan")
        return ok(plan)
