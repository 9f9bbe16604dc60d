def test_create_country_and_cities(client, auth_headers):
    country = client.post("/api/v1/countries/", json={"name": "Finland"}, headers=auth_headers)
    assert country.status_code == 200
    country_id = country.json()["id"]

    city = client.post(
        "/api/v1/cities/",
        json={"name": "Turku", "country_id": country_id, "popularity": "popular"},
        headers=auth_headers,
    )
    assert city.status_code == 200
    assert city.json()["popularity"] == "popular"

    cities = client.get(f"/api/v1/countries/{country_id}/cities", headers=auth_headers)
    assert [c["name"] for c in cities.json()] == ["Turku"]


def test_duplicate_country_conflicts(client, auth_headers):
    client.post("/api/v1/countries/", json={"name": "Norway"}, headers=auth_headers)
    response = client.post("/api/v1/countries/", json={"name": "Norway"}, headers=auth_headers)
    assert response.status_code == 409


def test_unknown_popularity_is_rejected(client, auth_headers):
    response = client.post("/api/v1/cities/", json={"name": "Nowhere", "popularity": "famous"}, headers=auth_headers)
    assert response.status_code == 422


def test_city_needs_existing_country(client, auth_headers):
    response = client.post("/api/v1/cities/", json={"name": "Lost", "country_id": 77}, headers=auth_headers)
    assert response.status_code == 400


def test_cities_of_unknown_country(client, auth_headers):
    assert client.get("/api/v1/countries/5/cities", headers=auth_headers).status_code == 404
