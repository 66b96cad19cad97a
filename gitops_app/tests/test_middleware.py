from fastapi.testclient import TestClient

from gitops_app.api.main import create_app


def test_request_id_header_on_every_route(make_settings):
    client = TestClient(create_app(make_settings()))

    ids = set()
    for path in ("/", "/health", "/version", "/missing"):
        r = client.get(path)
        assert r.headers.get("x-request-id")
        ids.add(r.headers["x-request-id"])
    assert len(ids) == 4


def test_request_completed_is_logged(make_settings, log_events):
    client = TestClient(create_app(make_settings()))

    ok = client.get("/version")
    missing = client.get("/missing")

    completed = {e["path"]: e for e in log_events("request_completed")}
    assert completed["/version"]["method"] == "GET"
    assert completed["/version"]["status_code"] == 200
    assert completed["/version"]["request_id"] == ok.headers["x-request-id"]
    assert completed["/version"]["duration_ms"] >= 0
    assert completed["/missing"]["status_code"] == 404
    assert completed["/missing"]["request_id"] == missing.headers["x-request-id"]


def test_request_id_is_bound_for_handler_logs(make_settings, log_events):
    client = TestClient(create_app(make_settings(log_level="DEBUG")))

    r = client.get("/health")

    checks = log_events("health_check")
    assert len(checks) == 1
    assert checks[0]["request_id"] == r.headers["x-request-id"]
