from __future__ import annotations

from functools import wraps

from flask import Flask, g, jsonify, request, send_file

from ..container import Container
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, ValidationError

# Methods routed to ResourceHandler.dispatch; only GET/POST/PUT/DELETE map to an operation.
RESOURCE_METHODS = ["GET", "POST", "PUT", "DELETE", "PATCH", "HEAD", "OPTIONS"]

WRITE_METHODS = {"POST", "PUT", "DELETE"}

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def register(app: Flask, container: Container) -> None:
    def login_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if app.config.get("API_REQUIRE_LOGIN"):
                s = g.get("auth_session")
                if s is None:
                    raise AuthenticationError("Please log in to continue")
                if request.method in WRITE_METHODS and s.principal.role != Role.ADMIN:
                    raise AuthorizationError("Guest accounts are read-only")
            return view(*args, **kwargs)

        return wrapper

    @app.route("/api/<resource>", methods=RESOURCE_METHODS, endpoint="resource_collection")
    @login_required
    def resource_collection(resource: str):
        handler = container.registry.get(resource)

        body = None
        if request.method in {"POST", "PUT"}:
            body = request.get_json(silent=True)

        outcome = handler.dispatch(request.method, query=request.args, body=body)
        return jsonify(outcome.body), outcome.status

    @app.route("/api/<resource>/analytics", methods=["GET"], endpoint="resource_analytics")
    @login_required
    def resource_analytics(resource: str):
        return jsonify(container.analytics_service.summarize(resource))

    @app.route("/api/<resource>/import", methods=["POST"], endpoint="resource_import")
    @login_required
    def resource_import(resource: str):
        upload = request.files.get("file")
        if upload is None or not upload.filename:
            raise ValidationError("Missing upload field 'file'")

        created = container.transfer_service.import_file(resource, upload.filename, upload.stream)
        return jsonify(created), 201

    @app.route("/api/<resource>/export", methods=["GET"], endpoint="resource_export")
    @login_required
    def resource_export(resource: str):
        fmt = (request.args.get("format") or "xlsx").lower()

        if fmt == "csv":
            csv_bytes = container.transfer_service.export_csv(resource).encode("utf-8-sig")
            return app.response_class(
                csv_bytes,
                mimetype="text/csv",
                headers={"Content-Disposition": f"attachment; filename={resource}.csv"},
            )
        if fmt == "xlsx":
            out = container.transfer_service.export_excel(resource)
            return send_file(out, mimetype=XLSX_MIMETYPE, as_attachment=True, download_name=f"{resource}.xlsx")

        raise ValidationError("format must be 'xlsx' or 'csv'")
