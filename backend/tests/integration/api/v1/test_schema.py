def test_list_tables(client, auth_headers):
    response = client.get("/api/v1/schema/tables", headers=auth_headers)
    assert response.status_code == 200
    names = {table["name"] for table in response.json()}
    assert {"users", "stores", "products", "order_items", "image"} <= names


def test_describe_table(client, auth_headers):
    response = client.get("/api/v1/schema/tables/cities", headers=auth_headers)
    assert response.status_code == 200
    body = response.json()
    assert [c["name"] for c in body["columns"]] == ["id", "name", "country_id", "popularity"]
    assert body["foreign_keys"] == [{
        "table": "cities",
        "column": "country_id",
        "target_table": "countries",
        "target_column": "id",
        "ondelete": None,
    }]


def test_unknown_table_is_not_found(client, auth_headers):
    assert client.get("/api/v1/schema/tables/widgets", headers=auth_headers).status_code == 404


def test_schema_requires_identity(client):
    assert client.get("/api/v1/schema/tables").status_code == 401


def test_health_is_public(client):
    assert client.get("/health").json() == {"status": "ok"}
