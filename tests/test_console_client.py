import pytest
import requests

from estate_console import client


class FakeResponse:
    def __init__(self, status_code=200, payload=None):
        self.status_code = status_code
        self._payload = payload

    def json(self):
        return self._payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


class Recorder(list):
    """Outgoing requests as (method, url, kwargs); answers come from ``queue``."""

    def __init__(self):
        super().__init__()
        self.queue = []

    def handler(self, method):
        def send(url, **kwargs):
            self.append((method, url, kwargs))
            return self.queue.pop(0)
        return send


@pytest.fixture
def calls(monkeypatch):
    recorder = Recorder()
    monkeypatch.setattr(client, "API_BASE", "http://backend:5000/")
    for method in ("get", "post", "delete"):
        monkeypatch.setattr(client.requests, method, recorder.handler(method))
    return recorder


def test_list_records_gets_collection(calls):
    calls.queue.append(FakeResponse(payload=[{"id": 1}]))

    assert client.list_records("properties") == [{"id": 1}]
    method, url, kwargs = calls[0]
    assert (method, url) == ("get", "http://backend:5000/properties")
    assert kwargs["timeout"] == 30


def test_create_record_sends_only_resource_fields(calls):
    calls.queue.append(FakeResponse(201, {"id": 1, "name": "Ridge", "image": ""}))

    created = client.create_record("projects", {"name": "Ridge", "price": "5", "description": "d"})

    assert created["id"] == 1
    method, url, kwargs = calls[0]
    assert (method, url) == ("post", "http://backend:5000/projects")
    assert kwargs["data"] == {"name": "Ridge", "description": "d"}
    assert "files" not in kwargs


def test_create_record_attaches_image(calls):
    calls.queue.append(FakeResponse(201, {"id": 2, "image": "/uploads/1.png"}))
    image = ("a.png", b"png", "image/png")

    client.create_record("properties", {"name": "Villa"}, image=image)

    _, _, kwargs = calls[0]
    assert kwargs["files"] == {"image": image}
    assert kwargs["timeout"] == 60


def test_create_record_raises_on_server_error(calls):
    calls.queue.append(FakeResponse(500, {"message": "Something went wrong!"}))

    with pytest.raises(requests.HTTPError):
        client.create_record("properties", {"name": "Villa"})


def test_delete_record_returns_message_even_when_missing(calls):
    calls.queue.append(FakeResponse(404, {"message": "Property not found"}))

    assert client.delete_record("properties", 9) == "Property not found"
    assert calls[0][:2] == ("delete", "http://backend:5000/properties/9")


def test_image_url(monkeypatch):
    monkeypatch.setattr(client, "API_BASE", "http://backend:5000")
    assert client.image_url({"image": "/uploads/1.png"}) == "http://backend:5000/uploads/1.png"
    assert client.image_url({"image": ""}) is None
