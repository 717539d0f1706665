from __future__ import annotations

from flask import Flask

from ..common.http import current_user_id, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard/stats", methods=["GET"], endpoint="dashboard_stats")
    def dashboard_stats():
        return ok(container.dashboard_service.build_stats(current_user_id()))
