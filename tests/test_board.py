"""Family board: budget status and the catalog grouped by category."""

import pytest

from snackboard.services.board_service import budget_progress


def test_board_groups_snacks_by_category(client, make_family, make_category, make_snack, select, login):
    raw = make_family("RAW", points_allowed=800)
    nuts = make_category("Nuts")
    fruit = make_category("Fruit")
    mangos = make_snack("KS Sweet Mangos", points=16, categoryId=fruit["id"])
    pecans = make_snack("Pecans", points=25, categoryId=nuts["id"])
    make_snack("Raisins", points=10)
    make_snack("Dried Pineapple", points=18, categoryId=fruit["id"])
    select(raw["id"], mangos["id"], 3)
    select(raw["id"], pecans["id"], 2)

    r = client.get(f"/api/families/{raw['id']}/board", headers=login("RAW"))
    assert r.status_code == 200
    board = r.json()

    assert board["family"]["name"] == "RAW"
    assert board["family"]["totalPointsUsed"] == 98
    assert board["pointsRemaining"] == 702
    assert board["isOverLimit"] is False
    assert board["progress"] == pytest.approx(12.25)

    assert [g["name"] for g in board["categories"]] == ["Fruit", "Nuts", "Other"]
    fruit_group = board["categories"][0]
    assert fruit_group["categoryId"] == fruit["id"]
    assert [s["name"] for s in fruit_group["snacks"]] == ["Dried Pineapple", "KS Sweet Mangos"]
    assert fruit_group["snacks"][0]["quantity"] == 0
    assert fruit_group["snacks"][0]["selectionId"] is None
    assert fruit_group["snacks"][1]["quantity"] == 3
    assert fruit_group["snacks"][1]["pointsUsed"] == 48
    assert fruit_group["snacks"][1]["selectionId"] is not None
    assert board["categories"][2]["categoryId"] is None


def test_category_named_other_stays_separate(client, admin_headers, make_family, make_category, make_snack):
    raw = make_family("RAW")
    other = make_category("Other")
    make_snack("Pecans", categoryId=other["id"])
    make_snack("Raisins")

    board = client.get(f"/api/families/{raw['id']}/board", headers=admin_headers).json()
    assert [(g["name"], g["categoryId"]) for g in board["categories"]] == [
        ("Other", other["id"]),
        ("Other", None),
    ]


def test_board_over_limit(client, admin_headers, make_family, make_snack, select):
    raw = make_family("RAW", points_allowed=40)
    pecans = make_snack("Pecans", points=25)
    select(raw["id"], pecans["id"], 2)

    board = client.get(f"/api/families/{raw['id']}/board", headers=admin_headers).json()
    assert board["pointsRemaining"] == -10
    assert board["isOverLimit"] is True
    assert board["progress"] == 100.0


def test_board_of_missing_family_is_404(client, admin_headers):
    assert client.get("/api/families/999/board", headers=admin_headers).status_code == 404


@pytest.mark.parametrize("used, allowed, expected", [
    (0, 800, 0.0),
    (98, 800, 12.25),
    (400, 800, 50.0),
    (900, 800, 100.0),
    (10, 0, 0.0),
])
def test_budget_progress(used, allowed, expected):
    assert budget_progress(used, allowed) == pytest.approx(expected)
