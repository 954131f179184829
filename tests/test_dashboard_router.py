import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from app.main import app
from video.adapter.input.web.dashboard_router import get_dashboard_usecase
from video.application.usecase.dashboard_query_usecase import DashboardQueryUseCase


@pytest.fixture
def client(fake_repository):
    app.dependency_overrides[get_dashboard_usecase] = lambda: DashboardQueryUseCase(fake_repository)
    yield TestClient(app)
    app.dependency_overrides.clear()


def _ids(payload):
    return [item["id"] for item in payload["items"]]


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_data_returns_every_record(client):
    response = client.get("/api/data")

    assert response.status_code == 200
    body = response.json()
    assert [v["id"] for v in body] == ["v1", "v2", "v3", "v4"]
    assert body[3]["published_at"] is None
    assert body[0]["published_at"].startswith("2024-01-05T09:00:00")


def test_table_filters_and_sorts(client):
    response = client.get(
        "/api/table", params={"title": "routine", "sort_key": "views", "direction": "descending"}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 4
    assert body["filtered"] == 2
    assert body["sort"] == {"key": "views", "direction": "descending"}
    assert _ids(body) == ["v3", "v1"]


def test_table_toggle_flips_current_sort(client):
    body = client.get("/api/table", params={"sort_key": "views", "toggle": "views"}).json()
    assert body["sort"] == {"key": "views", "direction": "descending"}

    body = client.get("/api/table", params={"sort_key": "views", "toggle": "title"}).json()
    assert body["sort"] == {"key": "title", "direction": "ascending"}
    assert _ids(body) == ["v2", "v3", "v1", "v4"]


def test_table_date_range(client):
    body = client.get("/api/table", params={"startDate": "2024-01-05", "endDate": "2024-01-10"}).json()
    assert _ids(body) == ["v1", "v2"]


def test_table_ignores_malformed_date(client):
    body = client.get("/api/table", params={"startDate": "not-a-date"}).json()
    assert body["filtered"] == 4


def test_table_rejects_unknown_sort_key(client):
    response = client.get("/api/table", params={"sort_key": "rating"})
    assert response.status_code == 400
    assert "rating" in response.json()["detail"]


def test_analysis_single_field_and_metric(client):
    response = client.get("/api/analysis", params={"field": "hashtags", "metric": "views"})

    assert response.status_code == 200
    body = response.json()
    assert body["filtered"] == 4
    assert body["top_n"] == 10
    assert list(body["charts"]) == ["hash_tags"]
    chart = body["charts"]["hash_tags"]["views"]
    assert chart["labels"] == ["#vlog", "#routine", "#food", "#recipe"]
    assert chart["datasets"][0]["data"] == [2500, 1000, 500, 500]
    assert chart["datasets"][0]["label"] == "Views"


def test_analysis_defaults_to_all_nine_charts(client):
    charts = client.get("/api/analysis", params={"top_n": 2}).json()["charts"]

    assert set(charts) == {"hash_tags", "topics", "tags"}
    for per_metric in charts.values():
        assert set(per_metric) == {"views", "frequency", "effectiveness"}
        assert len(per_metric["views"]["labels"]) <= 2


def test_analysis_respects_filters(client):
    body = client.get("/api/analysis", params={"channel": "kitchen", "field": "topics", "metric": "frequency"}).json()
    chart = body["charts"]["topics"]["frequency"]
    assert chart["labels"] == ["Food", "Lifestyle"]
    assert chart["datasets"][0]["data"] == [2, 1]


def test_analysis_rejects_unknown_metric(client):
    assert client.get("/api/analysis", params={"metric": "likes"}).status_code == 400


def test_analysis_validates_top_n(client):
    assert client.get("/api/analysis", params={"top_n": 0}).status_code == 422


def test_dashboard_selected_chart(client):
    body = client.get("/api/dashboard", params={"field": "topics", "metric": "frequency"}).json()

    assert body["selected"]["field"] == "topics"
    assert body["selected"]["metric"] == "frequency"
    assert body["selected"]["chart"]["labels"] == ["Lifestyle", "Food", "Health"]
    assert body["table"]["filtered"] == 4
    assert len(body["charts"]) == 3


def test_dashboard_rejects_unknown_field(client):
    assert client.get("/api/dashboard", params={"field": "channels"}).status_code == 400


def test_repository_failure_is_reported_as_server_error(repository_factory):
    broken = repository_factory(error=OperationalError("SELECT * FROM videos", {}, Exception("down")))
    app.dependency_overrides[get_dashboard_usecase] = lambda: DashboardQueryUseCase(broken)
    try:
        response = TestClient(app).get("/api/data")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {"detail": "Server Error"}


def test_empty_source_returns_empty_views(repository_factory):
    app.dependency_overrides[get_dashboard_usecase] = lambda: DashboardQueryUseCase(repository_factory([]))
    try:
        client = TestClient(app)
        table = client.get("/api/table").json()
        analysis = client.get("/api/analysis", params={"field": "tags", "metric": "effectiveness"}).json()
    finally:
        app.dependency_overrides.clear()

    assert table == {"total": 0, "filtered": 0, "sort": None, "items": []}
    assert analysis["charts"]["tags"]["effectiveness"]["labels"] == []


def test_table_keeps_trailing_space_in_filter(client):
    body = client.get("/api/table", params={"title": "pasta "}).json()
    assert _ids(body) == ["v4"]
