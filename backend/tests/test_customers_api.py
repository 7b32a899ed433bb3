def test_create_and_lookup(client, customer):
    assert customer["name"] == "Ada Lovelace"
    assert customer["email"] == "ada@example.com"

    res = client.get(f"/api/customers/{customer['id']}")
    assert res.status_code == 200
    assert res.json()["id"] == customer["id"]
    assert client.get("/api/customers/missing").status_code == 404


def test_blank_name_rejected(client):
    assert client.post("/api/customers", json={"name": "   "}).status_code == 400


def test_list_sorted_and_searchable(client):
    for name in ("zed", "Alice", "bob"):
        client.post("/api/customers", json={"name": name})

    body = client.get("/api/customers").json()
    assert [c["name"] for c in body["items"]] == ["Alice", "bob", "zed"]
    assert body["total"] == 3

    found = client.get("/api/customers", params={"search": "ALI"}).json()
    assert [c["name"] for c in found["items"]] == ["Alice"]


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    assert res.json() == {"ok": True}
