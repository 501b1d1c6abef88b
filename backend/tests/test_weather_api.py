"""End-to-end tests for the weather endpoints."""
import copy

from fastapi.testclient import TestClient

from skypulse.core.errors import UpstreamError


def test_get_weather_returns_snapshot(api, fake_client):
    resp = api.get("/api/weather", params={"city": "Paris"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["city"] == "Paris"
    assert body["country"] == "France"
    assert body["current"]["aqi"] == 1
    assert body["current"]["condition_text"] == "Partly cloudy"
    assert len(body["forecast"]) == 3
    assert fake_client.forecast_calls == ["Paris"]


def test_second_call_within_ttl_is_served_from_cache(api, fake_client, clock):
    first = api.get("/api/weather", params={"city": "Paris"})
    clock.advance(300)
    second = api.get("/api/weather", params={"city": "pArIs"})

    assert second.status_code == 200
    assert second.content == first.content
    assert len(fake_client.forecast_calls) == 1


def test_call_after_ttl_refetches(api, fake_client, clock):
    api.get("/api/weather", params={"city": "Paris"})
    clock.advance(600)
    api.get("/api/weather", params={"city": "paris"})

    assert fake_client.forecast_calls == ["Paris", "paris"]


def test_cache_key_is_lowercased_but_not_trimmed(api, fake_client):
    api.get("/api/weather", params={"city": "Paris"})
    api.get("/api/weather", params={"city": "Paris "})

    assert len(fake_client.forecast_calls) == 2


def test_missing_city_is_bad_request(make_app, fake_client):
    app = make_app(fake_client)
    api = TestClient(app)

    resp = api.get("/api/weather")

    assert resp.status_code == 400
    assert resp.json() == {"error": "City is required"}
    assert fake_client.forecast_calls == []
    assert len(app.state.weather_cache) == 0


def test_empty_city_is_bad_request(api, fake_client):
    resp = api.get("/api/weather", params={"city": ""})

    assert resp.status_code == 400
    assert fake_client.forecast_calls == []


def test_upstream_failure_returns_500_and_caches_nothing(make_app, failing_client):
    app = make_app(failing_client)
    api = TestClient(app)

    resp = api.get("/api/weather", params={"city": "Atlantis"})

    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to fetch weather data"}
    assert len(app.state.weather_cache) == 0


def test_failed_fetch_is_retried_on_next_request(make_app, weather_client_cls, sample_payload):
    flaky = weather_client_cls(forecast=sample_payload, error=UpstreamError("Provider request failed"))
    api = TestClient(make_app(flaky))

    assert api.get("/api/weather", params={"city": "Paris"}).status_code == 500
    flaky.error = None
    assert api.get("/api/weather", params={"city": "Paris"}).status_code == 200
    assert len(flaky.forecast_calls) == 2


def test_malformed_payload_returns_500(make_app, weather_client_cls, sample_payload):
    broken = copy.deepcopy(sample_payload)
    del broken["current"]["condition"]
    app = make_app(weather_client_cls(forecast=broken))
    api = TestClient(app)

    resp = api.get("/api/weather", params={"city": "Paris"})

    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to fetch weather data"}
    assert len(app.state.weather_cache) == 0


def test_missing_air_quality_is_null_in_response(make_app, weather_client_cls, payload_without_air_quality):
    api = TestClient(make_app(weather_client_cls(forecast=payload_without_air_quality)))

    current = api.get("/api/weather", params={"city": "Paris"}).json()["current"]

    assert "aqi" in current and current["aqi"] is None
    assert "pollutant_details" in current and current["pollutant_details"] is None


def test_search_returns_provider_matches_unchanged(api, fake_client, sample_matches):
    resp = api.get("/api/weather/search", params={"query": "par"})

    assert resp.status_code == 200
    assert resp.json() == sample_matches
    assert fake_client.search_calls == ["par"]


def test_search_is_not_cached(api, fake_client):
    api.get("/api/weather/search", params={"query": "par"})
    api.get("/api/weather/search", params={"query": "par"})

    assert fake_client.search_calls == ["par", "par"]


def test_search_without_query_is_bad_request(api, fake_client):
    resp = api.get("/api/weather/search")

    assert resp.status_code == 400
    assert resp.json() == {"error": "Query required"}
    assert fake_client.search_calls == []


def test_search_upstream_failure_returns_500(make_app, failing_client):
    api = TestClient(make_app(failing_client))

    resp = api.get("/api/weather/search", params={"query": "par"})

    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to search city"}


def test_rate_limit_rejects_requests_over_the_window_budget(make_app, fake_client):
    api = TestClient(make_app(fake_client, RATE_LIMIT_MAX_REQUESTS=3))

    statuses = [api.get("/api/weather", params={"city": "Paris"}).status_code for _ in range(4)]

    assert statuses == [200, 200, 200, 429]
    assert len(fake_client.forecast_calls) == 1


def test_health_and_root(api):
    assert api.get("/health").json() == {"status": "ok", "service": "SkyPulse Weather API"}
    assert api.get("/").json()["status"] == "running"


def test_search_with_unexpected_provider_body_returns_json_error(make_app, weather_client_cls):
    odd = weather_client_cls(matches={"error": {"code": 1003, "message": "Parameter q is missing."}})
    api = TestClient(make_app(odd))

    resp = api.get("/api/weather/search", params={"query": "par"})

    assert resp.status_code == 500
    assert resp.headers["content-type"].startswith("application/json")
    assert resp.json() == {"error": "Failed to search city"}


def test_search_with_non_object_matches_returns_json_error(make_app, weather_client_cls):
    api = TestClient(make_app(weather_client_cls(matches=["Paris", "Tokyo"])))

    resp = api.get("/api/weather/search", params={"query": "par"})

    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to search city"}


def test_search_with_no_matches_returns_empty_list(make_app, weather_client_cls):
    api = TestClient(make_app(weather_client_cls(matches=[])))

    resp = api.get("/api/weather/search", params={"query": "zzzz"})

    assert resp.status_code == 200
    assert resp.json() == []
