from __future__ import annotations

from flask import Flask, request

from ..common.web import json_view, make_guards, ok
from ..container import Container
from ..core.enums import Role
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    _, roles_required = make_guards(container.auth_service.current_user)

    @app.route("/api/documents", methods=["GET"], endpoint="api_documents")
    @roles_required([Role.REGISTRAR])
    @json_view
    def api_documents():
        return ok(container.registrar_api.get_school_documents())

    @app.route("/api/documents", methods=["POST"], endpoint="api_upload_document")
    @roles_required([Role.REGISTRAR])
    @json_view
    def api_upload_document():
        upload = request.files.get("file")
        if upload is None or not upload.filename:
            raise ValidationError("Please choose a file to upload")
        document = container.document_service.upload(
            filename=upload.filename,
            stream=upload.stream,
            doc_type=request.form.get("type", ""),
            owner_id=request.form.get("ownerId", ""),
            name=request.form.get("name"),
            content_type=upload.mimetype or None,
        )
        return ok(document, message="Document uploaded", status=201)
