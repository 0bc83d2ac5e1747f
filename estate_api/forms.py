# estate_api/forms.py
from typing import Any, Dict, NamedTuple, Optional, Sequence

from fastapi import Request
from starlette.datastructures import UploadFile

from .crud import PROJECT_FIELDS, PROPERTY_FIELDS
from .uploads import UploadRejected

IMAGE_FIELD = "image"


class Submission(NamedTuple):
    values: Dict[str, Any]
    image: Optional[UploadFile]


def _is_file(value) -> bool:
    # a file input left blank still arrives as a part with an empty filename
    return isinstance(value, UploadFile) and bool(value.filename)


async def read_submission(request: Request, fields: Sequence[str]) -> Submission:
    """
    Pull the record fields and the optional image out of a create request.

    JSON bodies give their values verbatim (any JSON type). Form bodies give
    strings, empty ones included; a field only counts as missing when the key
    was never sent. Files are accepted only as a single part named ``image``.
    Any other body type yields no fields.
    """
    content_type = request.headers.get("content-type", "").lower()

    if content_type.startswith("application/json"):
        body = await request.json()
        if not isinstance(body, dict):
            return Submission({}, None)
        return Submission({k: body[k] for k in fields if k in body}, None)

    if not content_type.startswith(("multipart/form-data", "application/x-www-form-urlencoded")):
        return Submission({}, None)

    form = await request.form()
    images = []
    for key, value in form.multi_items():
        if not _is_file(value):
            continue
        if key != IMAGE_FIELD:
            raise UploadRejected(f"Unexpected file field: {key}")
        images.append(value)
    if len(images) > 1:
        raise UploadRejected(f"Expected at most one image, got {len(images)}")

    values = {}
    for key in fields:
        value = form.get(key)
        if isinstance(value, str):
            values[key] = value
    return Submission(values, images[0] if images else None)


async def property_submission(request: Request) -> Submission:
    return await read_submission(request, PROPERTY_FIELDS)


async def project_submission(request: Request) -> Submission:
    return await read_submission(request, PROJECT_FIELDS)
