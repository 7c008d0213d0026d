"""Normalization of upload requests into a single payload shape."""

import time
from typing import Any, Dict, Optional

from fastapi import Request
from starlette.datastructures import UploadFile
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.formparsers import MultiPartException

from app.errors import InvalidInput
from app.models.schemas import UploadPayload
from app.utils import strip_data_url_prefix

DEFAULT_FOLDER = "/uploads"
MISSING_JSON_FILE = 'Missing "file" (base64) in JSON body'
MISSING_FORM_FILE = 'Provide "file" as multipart file or base64 string'


def default_file_name() -> str:
    return f"upload_{int(time.time() * 1000)}.bin"


async def normalize_upload(request: Request) -> UploadPayload:
    """
    Extract the file payload, name and target folder from an upload request.

    JSON bodies carry base64 in ``file`` or ``base64``; anything else is read
    as a form carrying ``file`` or ``image``. File content is never inspected.

    Raises:
        InvalidInput: If no file could be found in the request
    """
    content_type = request.headers.get("content-type", "")
    if "application/json" in content_type:
        return normalize_json_body(await _read_json(request))

    try:
        async with request.form() as form:
            return await normalize_form(form)
    except (StarletteHTTPException, MultiPartException):
        # unparseable form bodies count as a missing file
        raise InvalidInput(MISSING_FORM_FILE)


async def _read_json(request: Request) -> Dict[str, Any]:
    try:
        body = await request.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def normalize_json_body(body: Dict[str, Any]) -> UploadPayload:
    payload = body.get("file")
    if payload is None:
        payload = body.get("base64")
    if not payload or not isinstance(payload, str):
        raise InvalidInput(MISSING_JSON_FILE)

    folder = body.get("folder")
    return UploadPayload(
        payload=strip_data_url_prefix(payload),
        file_name=_non_empty_str(body.get("fileName")) or default_file_name(),
        folder=folder if isinstance(folder, str) else DEFAULT_FOLDER,
    )


async def normalize_form(form) -> UploadPayload:
    part = form.get("file")
    if part is None:
        part = form.get("image")

    file_name = _non_empty_str(form.get("fileName"))
    payload = None
    if isinstance(part, UploadFile):
        payload = await part.read()
        file_name = file_name or part.filename or default_file_name()
    elif isinstance(part, str):
        payload = strip_data_url_prefix(part)
        file_name = file_name or default_file_name()

    if not payload:
        raise InvalidInput(MISSING_FORM_FILE)

    folder = form.get("folder")
    return UploadPayload(
        payload=payload,
        file_name=file_name,
        folder=folder if isinstance(folder, str) else DEFAULT_FOLDER,
    )


def _non_empty_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) and value else None
