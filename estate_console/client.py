# estate_console/client.py
import os
from typing import Optional

import requests

API_BASE = os.environ.get("API_BASE", "http://localhost:5000")

RESOURCE_FIELDS = {
    "properties": ("name", "price", "location", "sqft"),
    "projects": ("name", "location", "description"),
}


def _url(path: str) -> str:
    return API_BASE.rstrip("/") + path

def post_form(path: str, form_data: dict = None, files: dict = None):
    """Send a multipart POST; the backend reads every field as a form field."""
    if files:
        resp = requests.post(_url(path), data=form_data or {}, files=files, timeout=60)
    else:
        resp = requests.post(_url(path), data=form_data or {}, timeout=30)
    resp.raise_for_status()
    return resp

def get_json(path: str, params: dict = None):
    resp = requests.get(_url(path), params=params or {}, timeout=30)
    resp.raise_for_status()
    return resp.json()

def delete(path: str):
    resp = requests.delete(_url(path), timeout=30)
    if resp.status_code != 404:
        resp.raise_for_status()
    return resp


def list_records(kind: str):
    return get_json(f"/{kind}")

def create_record(kind: str, fields: dict, image: Optional[tuple] = None):
    """
    Create a property or project.

    ``image`` is a ``(filename, bytes, content_type)`` tuple, as accepted by requests.
    Fields outside the resource's field set are dropped.
    """
    form_data = {k: v for k, v in fields.items() if k in RESOURCE_FIELDS[kind]}
    files = {"image": image} if image else None
    return post_form(f"/{kind}", form_data=form_data, files=files).json()

def delete_record(kind: str, record_id: int) -> str:
    return delete(f"/{kind}/{record_id}").json().get("message", "")

def image_url(record: dict) -> Optional[str]:
    image = record.get("image")
    return _url(image) if image else None
