import pytest
from fastapi.testclient import TestClient

from edge_resizer.handlers.origin_request import get_responder
from edge_resizer.main import app
from edge_resizer.models import OriginObject
from edge_resizer.services.storage import OriginFetchError

from .conftest import make_request


@pytest.fixture
def client_for(responder_for):
    def _build(result):
        responder, _ = responder_for(result)
        app.dependency_overrides[get_responder] = lambda: responder
        return TestClient(app)

    yield _build
    app.dependency_overrides.clear()


def _event(request):
    return {"Records": [{"cf": {"request": request}}]}


def test_healthz():
    assert TestClient(app).get("/healthz").json() == {"status": "ok"}


def test_passthrough_echoes_request(client_for, png_bytes):
    client = client_for(OriginObject(body=png_bytes))
    request = make_request("foo=bar")
    response = client.post("/origin-request", json=_event(request))
    assert response.status_code == 200
    assert response.json() == request


def test_generated_response(client_for, png_bytes):
    client = client_for(OriginObject(body=png_bytes))
    body = client.post("/origin-request", json=_event(make_request("size=50x"))).json()
    assert body["status"] == 200
    assert body["headers"]["content-type"] == [{"key": "Content-Type", "value": "image/png"}]


def test_origin_error(client_for):
    client = client_for(OriginFetchError(404, "NoSuchKey"))
    assert client.post("/origin-request", json=_event(make_request("size=50x"))).json() == {"status": 404}


def test_bad_event(client_for, png_bytes):
    client = client_for(OriginObject(body=png_bytes))
    assert client.post("/origin-request", json={"Records": []}).status_code == 400
