import httpx

from conftest import make_remote_catalog


def test_list_all(client):
    response = client.get("/destinations")

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 12
    assert body["query"] is None
    assert body["destinations"][0]["name"] == "Everest Base Camp Trek"


def test_list_with_filters(client):
    response = client.get("/destinations", params={"country": "Nepal", "difficulty": "Easy"})

    names = {d["name"] for d in response.json()["destinations"]}
    assert names == {"Kathmandu Valley Tour", "Pokhara Lake District"}


def test_price_range(client):
    response = client.get("/destinations", params={"min_price": 800, "max_price": 900})

    assert {d["price"] for d in response.json()["destinations"]} == {899}


def test_negative_price_is_rejected(client):
    assert client.get("/destinations", params={"min_price": -1}).status_code == 422


def test_search_ignores_filters(client):
    response = client.get("/destinations", params={"q": " everest ", "country": "Japan"})

    body = response.json()
    assert body["query"] == "everest"
    assert body["destinations"][0]["name"] == "Everest Base Camp Trek"
    assert all(d["country"] == "Nepal" for d in body["destinations"])


def test_blank_search_lists_everything(client):
    body = client.get("/destinations", params={"q": "   "}).json()
    assert body["total"] == 12
    assert body["query"] is None


def test_search_never_returns_more_than_ten(client):
    assert client.get("/destinations", params={"q": "a"}).json()["total"] == 10


def test_remote_read_failure_looks_like_no_results(client, use_catalog):
    catalog, _ = make_remote_catalog(lambda request: httpx.Response(500, json={}))
    use_catalog(catalog)

    response = client.get("/destinations", params={"country": "Nepal"})

    assert response.status_code == 200
    assert response.json() == {"destinations": [], "total": 0, "query": None}
    assert client.get("/destinations/1").status_code == 404


def test_featured(client):
    featured = client.get("/destinations/featured").json()

    assert len(featured) == 6
    assert all(d["country"] == "Nepal" for d in featured)
    assert client.get("/destinations/featured", params={"limit": 2}).json()[1]["name"] == (
        "Annapurna Circuit Trek"
    )


def test_filter_options(client):
    body = client.get("/destinations/filters").json()

    assert body["countries"] == ["Bhutan", "Indonesia", "Japan", "Nepal", "Tanzania"]
    assert "Khumbu" in body["regions"]
    assert body["difficulty_levels"] == ["Easy", "Moderate", "Challenging", "Expert"]


def test_detail_includes_map_and_directions(client):
    response = client.get("/destinations/1")

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Everest Base Camp Trek"
    assert body["has_location"] is True
    assert body["map"]["markers"][0]["title"] == "Everest Base Camp Trek"
    assert body["directions_url"].endswith("destination=27.9881,86.925")
    assert body["season_badge"] == "Autumn"


def test_unknown_destination_is_404(client):
    response = client.get("/destinations/999999")

    assert response.status_code == 404
    assert response.json()["detail"] == "Destination not found"


def test_pages(client):
    about = client.get("/pages/about-nepal").json()
    assert "Sagarmatha National Park" in about["unesco_sites"]

    assert client.get("/pages/contact").json()["email"] == "info@wanderlust.com"


def test_health(client):
    assert client.get("/health").json()["status"] == "healthy"
    assert client.get("/health/live").json() == {"status": "alive"}

    ready = client.get("/health/ready").json()
    assert ready["status"] == "ready"
    assert ready["checks"]["catalog_mode"] == "fallback"


def test_root_reports_catalog_mode(client):
    response = client.get("/")

    assert response.json()["catalog_mode"] == "fallback"
    assert "X-Process-Time" in response.headers


def test_metrics(client):
    client.get("/health")
    response = client.get("/metrics")

    assert response.status_code == 200
    assert "http_requests_total" in response.text
