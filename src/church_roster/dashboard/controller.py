from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_body, json_errors
from .stats import trend_delta


def register(app: Flask, container) -> None:
    dashboard = container.dashboard_service

    def _window():
        return request.args.get("window", type=int)

    @app.route("/api/status", methods=["GET"], endpoint="status")
    def status():
        return jsonify({"processing": container.queue.busy})

    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    @json_errors
    def dashboard_stats():
        stats = dashboard.stats(window=_window())
        return jsonify({**stats.to_dict(), "trendDelta": trend_delta(stats)})

    @app.route("/api/dashboard/insight", methods=["GET"], endpoint="dashboard_insight")
    @json_errors
    def dashboard_insight():
        return jsonify({"insight": dashboard.insight(window=_window())})

    @app.route("/api/settings/theme", methods=["GET"], endpoint="get_theme")
    @json_errors
    def get_theme():
        return jsonify({"theme": container.theme_service.get().value})

    @app.route("/api/settings/theme", methods=["PUT"], endpoint="set_theme")
    @json_errors
    def set_theme():
        value = str(json_body().get("theme", ""))
        theme = container.queue.submit(container.theme_service.set, value).result()
        return jsonify({"theme": theme.value})
