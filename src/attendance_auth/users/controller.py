from __future__ import annotations

import logging

from flask import Flask, jsonify, request, session

from ..core.exceptions import AuthenticationError, ValidationError
from ..container import Container
from .mapping import user_to_api

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/login", methods=["POST"], endpoint="api_login")
    def api_login():
        data = request.get_json(silent=True) or {}
        identifier = str(data.get("identifier") or "")
        password = str(data.get("password") or "")

        try:
            user = container.auth_service.authenticate(identifier, password)
        except ValidationError as e:
            return jsonify({"message": str(e)}), 400
        except AuthenticationError as e:
            return jsonify({"message": str(e)}), 401
        except Exception as e:
            logger.exception("Login failed with an unexpected error")
            if bool(app.config.get("DEBUG", False)):
                return jsonify({"message": f"Login failed: {e}"}), 500
            return jsonify({"message": "Login failed"}), 500

        session.clear()
        session["user_id"] = user.id
        session["role"] = user.role.value
        return jsonify(user_to_api(user))

    @app.route("/api/logout", methods=["POST"], endpoint="api_logout")
    def api_logout():
        session.clear()
        return jsonify({"success": True})
