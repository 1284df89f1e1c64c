from __future__ import annotations

from flask import Flask, jsonify, request

from ..clock.window import derive_window
from ..common.datetime_utils import epoch_ms, now_utc
from ..container import Container
from ..core.exceptions import AlreadyCheckedInError, StorageError, ValidationError

STATS_FAILED = "Failed to fetch stats"
CHECKIN_FAILED = "Check-in failed"


def register(app: Flask, container: Container) -> None:
    def _error(message: str, status: int, code: str | None = None):
        body = {"error": message}
        if code:
            body["code"] = code
        return jsonify(body), status

    @app.route("/api/time", methods=["GET"], endpoint="api_time")
    def api_time():
        return jsonify({"timestamp": epoch_ms(now_utc())})

    @app.route("/api/window", methods=["GET"], endpoint="api_window")
    def api_window():
        return jsonify(derive_window(now_utc()).to_dict())

    @app.route("/api/roster", methods=["GET"], endpoint="api_roster")
    def api_roster():
        return jsonify(container.roster.to_dict())

    @app.route("/api/stats", methods=["GET"], endpoint="api_stats")
    def api_stats():
        try:
            events = container.checkin_service.recent_events(now_utc())
        except Exception:
            app.logger.exception("stats query failed")
            return _error(STATS_FAILED, 500)
        return jsonify([e.to_dict() for e in events])

    @app.route("/api/summary", methods=["GET"], endpoint="api_summary")
    def api_summary():
        try:
            return jsonify(container.stats_service.daily_summary(now_utc()))
        except Exception:
            app.logger.exception("daily summary failed")
            return _error(STATS_FAILED, 500)

    @app.route("/api/weekly", methods=["GET"], endpoint="api_weekly")
    def api_weekly():
        try:
            return jsonify(container.stats_service.weekly_summary(now_utc()))
        except Exception:
            app.logger.exception("weekly summary failed")
            return _error(STATS_FAILED, 500)

    @app.route("/api/checkin", methods=["POST"], endpoint="api_checkin")
    def api_checkin():
        """Body: {name, team, type, date}. A body that is not a JSON object counts as missing fields."""
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}

        try:
            checkin_id = container.checkin_service.submit(
                data.get("name"),
                data.get("team"),
                data.get("type"),
                data.get("date"),
            )
        except (ValidationError, AlreadyCheckedInError) as e:
            return _error(str(e), 400, e.code)
        except StorageError as e:
            app.logger.exception("check-in failed")
            return _error(CHECKIN_FAILED, 500, e.code)
        except Exception:
            app.logger.exception("check-in failed")
            return _error(CHECKIN_FAILED, 500, StorageError.code)

        app.logger.info(
            "check-in #%s: %s/%s %s %s", checkin_id, data.get("team"), data.get("name"), data.get("type"), data.get("date")
        )
        return jsonify({"success": True, "id": checkin_id})
