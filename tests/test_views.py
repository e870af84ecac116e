import json

from app.services.research import ResearchService
from app.views.research import get_research_service

from tests.conftest import FakeClient, fake_client_replying


def test_api_returns_result(make_client, sample_json):
    client = make_client(ResearchService(client=fake_client_replying(sample_json), demo_mode=False))
    resp = client.post("/api/research", json={
        "brand": "Samsung", "model": "WF45R6100AW", "serial": "", "description": "", "category": "",
    })
    assert resp.status_code == 200
    body = resp.json()
    assert body["itemName"] == "Samsung WF45R6100AW"
    assert body["currentReplacement"]["sameModel"][0]["isExactMatch"] is True


def test_api_rejects_empty_input(make_client):
    fake = fake_client_replying("{}")
    client = make_client(ResearchService(client=fake, demo_mode=False))
    resp = client.post("/api/research", json={"brand": "", "model": "", "serial": "", "description": "", "category": ""})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Please provide at least a brand, model, serial number, or description."}
    assert fake.messages.calls == []


def test_api_empty_body_object_is_rejected(make_client, demo_service):
    resp = make_client(demo_service).post("/api/research", json={})
    assert resp.status_code == 400


def test_api_parse_failure(make_client):
    client = make_client(ResearchService(client=fake_client_replying("not json at all"), demo_mode=False))
    resp = client.post("/api/research", json={"brand": "Samsung"})
    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to parse research results. Please try again."}


def test_api_no_text_block(make_client):
    client = make_client(ResearchService(client=FakeClient(content=[]), demo_mode=False))
    resp = client.post("/api/research", json={"brand": "Samsung"})
    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to get a response from the research engine."}


def test_api_upstream_failure(make_client):
    client = make_client(ResearchService(client=FakeClient(exc=RuntimeError("invalid x-api-key")), demo_mode=False))
    resp = client.post("/api/research", json={"model": "WF45R6100AW"})
    assert resp.status_code == 500
    assert resp.json() == {"error": "invalid x-api-key"}


def test_api_demo_mode(make_client, demo_service):
    resp = make_client(demo_service).post("/api/research", json={"brand": "Samsung", "category": "washer"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["itemName"] == "Samsung Washing Machine"
    assert "(DEMO DATA)" in body["ageEstimate"]["source"]
    assert body["confidence"]["level"] == "low"


def test_api_unknown_category_is_validation_error(make_client, demo_service):
    resp = make_client(demo_service).post("/api/research", json={"brand": "Samsung", "category": "boat"})
    assert resp.status_code == 422


def test_search_page_lists_grouped_categories(make_client, demo_service):
    resp = make_client(demo_service).get("/")
    assert resp.status_code == 200
    assert '<optgroup label="Appliances">' in resp.text
    assert '<option value="oven-range">Oven / Range / Stove</option>' in resp.text
    assert "Demo Mode" in resp.text


def test_form_submission_renders_results(make_client, demo_service):
    resp = make_client(demo_service).post("/research", data={"brand": "Samsung", "model": "WF45R6100AW", "category": "washer"})
    assert resp.status_code == 200
    assert "Samsung WF45R6100AW" in resp.text
    assert "High Confidence" in resp.text
    assert "Same / Equivalent Model" in resp.text
    assert "Comparable New Models" in resp.text


def test_form_submission_error_partial(make_client, demo_service):
    resp = make_client(demo_service).post("/research", data={"brand": "", "category": ""})
    assert resp.status_code == 400
    assert "Research Failed" in resp.text
    assert "Please provide at least a brand" in resp.text


def test_results_without_pricing(make_client):
    client = make_client(ResearchService(client=fake_client_replying('{"itemName": "Mystery Box"}'), demo_mode=False))
    resp = client.post("/research", data={"description": "mystery box"})
    assert resp.status_code == 200
    assert "Mystery Box" in resp.text
    assert "No pricing data available." in resp.text
    assert "Low Confidence - Estimated" in resp.text


def test_health_reports_mode(make_client, demo_service):
    resp = make_client(demo_service).get("/health")
    assert resp.json() == {"status": "healthy", "mode": "demo"}


def test_api_omits_missing_urls(make_client, demo_service):
    resp = make_client(demo_service).post("/api/research", json={"brand": "Samsung", "model": "WF45R6100AW", "category": "washer"})
    assert resp.status_code == 200
    replacement = resp.json()["currentReplacement"]
    entries = replacement["sameModel"] + replacement["comparable"]
    assert entries
    assert all("url" not in entry for entry in entries)


def test_api_keeps_http_urls(make_client):
    reply = json.dumps({"currentReplacement": {"comparable": [
        {"retailer": "Amazon", "price": "$429", "isExactMatch": False, "url": "https://www.amazon.com/dp/B0TEST"},
    ]}})
    client = make_client(ResearchService(client=fake_client_replying(reply), demo_mode=False))
    body = client.post("/api/research", json={"brand": "LG"}).json()
    assert body["currentReplacement"]["comparable"][0]["url"] == "https://www.amazon.com/dp/B0TEST"


def test_results_never_link_script_urls(make_client):
    reply = json.dumps({"currentReplacement": {"comparable": [
        {"retailer": "Amazon", "price": "$429", "isExactMatch": False, "url": "javascript:alert(document.cookie)"},
    ]}})
    client = make_client(ResearchService(client=fake_client_replying(reply), demo_mode=False))
    resp = client.post("/research", data={"brand": "LG"})
    assert resp.status_code == 200
    assert "Amazon" in resp.text
    assert "javascript:" not in resp.text


def test_error_body_documented_in_openapi(make_client, demo_service):
    schema = make_client(demo_service).get("/openapi.json").json()
    responses = schema["paths"]["/api/research"]["post"]["responses"]
    for status in ("400", "500"):
        ref = responses[status]["content"]["application/json"]["schema"]["$ref"]
        assert ref.endswith("/ErrorResponse")


def test_research_service_is_shared():
    get_research_service.cache_clear()
    try:
        assert get_research_service() is get_research_service()
    finally:
        get_research_service.cache_clear()
