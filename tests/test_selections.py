"""Selection upsert: one row per (family, snack), quantity overwritten in place."""


def test_first_selection_creates_row(client, make_family, make_snack, select):
    raw = make_family("RAW")
    pecans = make_snack("Pecans", points=25)
    row = select(raw["id"], pecans["id"], 3)
    assert row["id"]
    assert row["familyId"] == raw["id"]
    assert row["snackId"] == pecans["id"]
    assert row["quantity"] == 3


def test_upsert_overwrites_same_row(client, admin_headers, make_family, make_snack, select):
    raw = make_family("RAW")
    pecans = make_snack("Pecans", points=25)
    first = select(raw["id"], pecans["id"], 3)
    second = select(raw["id"], pecans["id"], 1)
    assert second["id"] == first["id"]
    assert second["quantity"] == 1

    rows = client.get(f"/api/selections/{raw['id']}", headers=admin_headers).json()
    assert len(rows) == 1
    assert rows[0]["quantity"] == 1


def test_setting_zero_keeps_the_row(client, admin_headers, make_family, make_snack, select):
    raw = make_family("RAW")
    pecans = make_snack("Pecans", points=25)
    first = select(raw["id"], pecans["id"], 2)
    zeroed = select(raw["id"], pecans["id"], 0)
    assert zeroed["id"] == first["id"]
    assert zeroed["quantity"] == 0

    rows = client.get(f"/api/selections/{raw['id']}", headers=admin_headers).json()
    assert [r["quantity"] for r in rows] == [0]


def test_zero_on_first_write_materializes_row(client, admin_headers, make_family, make_snack, select):
    raw = make_family("RAW")
    pecans = make_snack("Pecans", points=25)
    row = select(raw["id"], pecans["id"], 0)
    assert row["quantity"] == 0
    rows = client.get(f"/api/selections/{raw['id']}", headers=admin_headers).json()
    assert len(rows) == 1


def test_every_quantity_reads_back(client, admin_headers, make_family, make_snack, select):
    raw = make_family("RAW")
    pecans = make_snack("Pecans", points=25)
    for quantity in (5, 0, 1, 12, 0):
        select(raw["id"], pecans["id"], quantity)
        rows = client.get(f"/api/selections/{raw['id']}", headers=admin_headers).json()
        assert rows[0]["quantity"] == quantity


def test_negative_quantity_is_rejected(client, admin_headers, make_family, make_snack):
    raw = make_family("RAW")
    pecans = make_snack("Pecans", points=25)
    r = client.post(
        "/api/selections",
        json={"familyId": raw["id"], "snackId": pecans["id"], "quantity": -1},
        headers=admin_headers,
    )
    assert r.status_code == 400
    assert r.json()["field"] == "quantity"


def test_unknown_family_or_snack_is_rejected(client, admin_headers, make_family, make_snack):
    raw = make_family("RAW")
    pecans = make_snack("Pecans", points=25)

    r = client.post(
        "/api/selections",
        json={"familyId": raw["id"], "snackId": 999, "quantity": 1},
        headers=admin_headers,
    )
    assert r.status_code == 400
    assert r.json() == {"message": "Snack does not exist", "field": "snackId"}

    r = client.post(
        "/api/selections",
        json={"familyId": 999, "snackId": pecans["id"], "quantity": 1},
        headers=admin_headers,
    )
    assert r.status_code == 400
    assert r.json()["field"] == "familyId"


def test_missing_fields_are_rejected(client, admin_headers):
    r = client.post("/api/selections", json={"familyId": 1, "snackId": 1}, headers=admin_headers)
    assert r.status_code == 400
    assert r.json()["field"] == "quantity"


def test_list_selections_joins_snack(client, admin_headers, make_family, make_snack, select):
    raw = make_family("RAW")
    tsk = make_family("TSK")
    pecans = make_snack("Pecans", points=25, store="Costco")
    raisins = make_snack("Raisins", points=10)
    select(raw["id"], pecans["id"], 2)
    select(tsk["id"], raisins["id"], 4)

    rows = client.get(f"/api/selections/{raw['id']}", headers=admin_headers).json()
    assert len(rows) == 1
    assert rows[0]["snack"]["name"] == "Pecans"
    assert rows[0]["snack"]["store"] == "Costco"
    assert rows[0]["snack"]["points"] == 25


def test_list_selections_of_missing_family_is_404(client, admin_headers):
    assert client.get("/api/selections/999", headers=admin_headers).status_code == 404


def test_family_sets_its_own_quantity(client, make_family, make_snack, login):
    raw = make_family("RAW", points_allowed=800)
    pecans = make_snack("Pecans", points=25)
    headers = login("RAW")
    r = client.post(
        "/api/selections",
        json={"familyId": raw["id"], "snackId": pecans["id"], "quantity": 2},
        headers=headers,
    )
    assert r.status_code == 200
    family = client.get(f"/api/families/{raw['id']}", headers=headers).json()
    assert family["totalPointsUsed"] == 50


def test_out_of_range_integers_are_rejected(client, admin_headers, make_family, make_snack):
    raw = make_family("RAW")
    pecans = make_snack("Pecans", points=25)
    cases = [
        ({"familyId": raw["id"], "snackId": pecans["id"], "quantity": 2**64}, "quantity"),
        ({"familyId": raw["id"], "snackId": pecans["id"], "quantity": 2**31}, "quantity"),
        ({"familyId": 2**63, "snackId": pecans["id"], "quantity": 1}, "familyId"),
        ({"familyId": raw["id"], "snackId": 2**64, "quantity": 1}, "snackId"),
    ]
    for body, field in cases:
        r = client.post("/api/selections", json=body, headers=admin_headers)
        assert r.status_code == 400, body
        assert r.json()["field"] == field

    r = client.get(f"/api/selections/{2**64}", headers=admin_headers)
    assert r.status_code == 400
