from __future__ import annotations

import logging
import mimetypes
from dataclasses import dataclass
from typing import BinaryIO, Optional

from werkzeug.utils import secure_filename

from ..api.client import ApiClient
from ..api.registrar import RegistrarApi
from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_UPLOAD_HANDLER_PATH
from ..core.enums import RefreshTopic
from ..core.exceptions import ApiError, ValidationError
from ..events.bus import RefreshBus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UploadTarget:
    upload_url: str
    file_url: str


class DocumentUploadService:
    """Upload a file to storage through a pre-signed URL, then register the document."""

    def __init__(
        self,
        api: ApiClient,
        registrar: RegistrarApi,
        bus: RefreshBus,
        *,
        handler_path: str = DEFAULT_UPLOAD_HANDLER_PATH,
    ):
        self._api = api
        self._registrar = registrar
        self._bus = bus
        self._handler_path = handler_path

    def request_upload_target(self, filename: str, content_type: str) -> UploadTarget:
        data = self._api.post(self._handler_path, {"filename": filename, "contentType": content_type}) or {}
        upload_url = data.get("uploadUrl") if isinstance(data, dict) else None
        file_url = data.get("url") if isinstance(data, dict) else None
        if not upload_url or not file_url:
            raise ApiError("Upload endpoint did not return an upload URL", payload=data)
        return UploadTarget(upload_url=upload_url, file_url=file_url)

    def upload(
        self,
        *,
        filename: str,
        stream: BinaryIO,
        doc_type: str,
        owner_id: str,
        name: Optional[str] = None,
        content_type: Optional[str] = None,
    ) -> dict:
        safe_name = secure_filename(filename or "")
        if not safe_name:
            raise ValidationError("Please choose a file to upload")
        doc_type = require_non_empty(doc_type, "Document type")
        owner_id = require_non_empty(owner_id, "Owner")
        content_type = content_type or mimetypes.guess_type(safe_name)[0] or "application/octet-stream"

        target = self.request_upload_target(safe_name, content_type)
        self._api.put_to_url(target.upload_url, stream, content_type=content_type)
        logger.info("uploaded %s for owner %s", safe_name, owner_id)

        document = self._registrar.create_school_document(
            name=(name or "").strip() or safe_name,
            doc_type=doc_type,
            owner_id=owner_id,
            file_url=target.file_url,
        )
        self._bus.notify(RefreshTopic.DOCUMENTS, "document uploaded", owner_id=owner_id)
        return document
