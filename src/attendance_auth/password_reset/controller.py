from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/forgot-password", methods=["POST"], endpoint="api_forgot_password")
    def api_forgot_password():
        data = request.get_json(silent=True) or {}
        flow = container.forgot_password_flow(
            origin=request.host_url,
            from_profile=bool(data.get("fromProfile")),
        )

        try:
            outcome = flow.submit(str(data.get("email") or ""))
        except ValidationError as e:
            return jsonify({"message": str(e)}), 400

        body = {"title": outcome.title, "message": outcome.message, "state": flow.state.value}
        return jsonify(body), (429 if outcome.is_error else 200)
