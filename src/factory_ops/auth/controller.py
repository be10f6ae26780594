from __future__ import annotations

from typing import Mapping

from flask import Flask, g, jsonify, request

from ..container import Container
from ..core.exceptions import AuthenticationError, ValidationError


def register(app: Flask, container: Container) -> None:
    @app.before_request
    def attach_auth_session():
        # Views read g.auth_session, never the raw cookie.
        g.auth_session = container.sessions.current()

    def _session_json(s):
        return {
            "success": True,
            "user": s.principal.to_dict(),
            "expires_at": s.expires_at.isoformat(),
        }

    @app.route("/api/auth/login", methods=["POST"], endpoint="login")
    def login():
        data = request.get_json(silent=True) or request.form
        if not isinstance(data, Mapping):
            raise ValidationError("Request body must be a JSON object")
        s = container.auth_service.login(str(data.get("username", "")), str(data.get("password", "")))
        g.auth_session = s
        return jsonify(_session_json(s))

    @app.route("/api/auth/logout", methods=["POST"], endpoint="logout")
    def logout():
        container.auth_service.logout()
        g.auth_session = None
        return jsonify({"success": True, "message": "Logged out"})

    @app.route("/api/auth/me", methods=["GET"], endpoint="me")
    def me():
        s = g.get("auth_session")
        if s is None:
            raise AuthenticationError("Not logged in")
        return jsonify(_session_json(s))
