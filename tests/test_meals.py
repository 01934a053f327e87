"""
Tests for the meal endpoints nested under a user.

Meal Flow
=========

1. LOG MEAL          POST   /api/users/1/meals        -> 201, Location /api/users/1/meals/1
2. LIST MEALS        GET    /api/users/1/meals        -> 200, active meals only
3. GET MEAL          GET    /api/users/1/meals/1      -> 200
4. UPDATE MEAL       PUT    /api/users/1/meals/1      -> 204
5. SOFT-DELETE MEAL  DELETE /api/users/1/meals/1      -> 204, then 404 on repeat
"""

from test_fixtures import (
    API,
    meal_payload,
    id_from_location,
    create_user_via_api,
    create_meal_via_api,
)


def test_create_meal_returns_location_and_echo(client):
    user_id = create_user_via_api(client)
    payload = meal_payload()

    r = client.post(f"{API}/users/{user_id}/meals", json=payload)

    assert r.status_code == 201
    assert r.headers["location"].startswith(f"{API}/users/{user_id}/meals/")
    assert r.json() == payload


def test_create_then_get_meal_round_trip(client):
    user_id = create_user_via_api(client)
    payload = meal_payload("dinner")
    r = client.post(f"{API}/users/{user_id}/meals", json=payload)
    meal_id = id_from_location(r.headers["location"])

    first = client.get(f"{API}/users/{user_id}/meals/{meal_id}")
    second = client.get(f"{API}/users/{user_id}/meals/{meal_id}")

    assert first.status_code == 200
    assert first.json() == {"id": meal_id, **payload}
    assert second.json()["id"] == meal_id


def test_create_meal_for_missing_user_is_404(client):
    r = client.post(f"{API}/users/999/meals", json=meal_payload())
    assert r.status_code == 404


def test_create_meal_uses_path_owner_not_body(client):
    owner = create_user_via_api(client)
    other = create_user_via_api(client, profile_type="athlete")

    meal_id = create_meal_via_api(client, owner, userId=other)

    assert client.get(f"{API}/users/{owner}/meals/{meal_id}").status_code == 200
    assert client.get(f"{API}/users/{other}/meals/{meal_id}").status_code == 404
    assert client.get(f"{API}/users/{other}/meals").json() == []


def test_list_meals_returns_only_active_meals_of_user(client):
    owner = create_user_via_api(client)
    other = create_user_via_api(client, profile_type="athlete")
    lunch = create_meal_via_api(client, owner, "lunch")
    dinner = create_meal_via_api(client, owner, "dinner")
    snack = create_meal_via_api(client, owner, "snack")
    create_meal_via_api(client, other, "lunch")

    assert client.delete(f"{API}/users/{owner}/meals/{dinner}").status_code == 204

    r = client.get(f"{API}/users/{owner}/meals")

    assert r.status_code == 200
    body = r.json()
    assert [m["id"] for m in body] == [lunch, snack]
    assert body[0] == {"id": lunch, **meal_payload("lunch")}


def test_list_meals_for_unknown_user_is_empty(client):
    r = client.get(f"{API}/users/12345/meals")
    assert r.status_code == 200
    assert r.json() == []


def test_get_meal_under_wrong_user_is_404(client):
    owner = create_user_via_api(client)
    other = create_user_via_api(client, profile_type="athlete")
    meal_id = create_meal_via_api(client, owner)

    r = client.get(f"{API}/users/{other}/meals/{meal_id}")

    assert r.status_code == 404
    assert r.content == b""


def test_update_meal(client):
    user_id = create_user_via_api(client)
    meal_id = create_meal_via_api(client, user_id)
    update = {"description": "Pasta", "calories": 800, "date": "2021-03-01T20:00:00"}

    r = client.put(f"{API}/users/{user_id}/meals/{meal_id}", json=update)

    assert r.status_code == 204
    assert client.get(f"{API}/users/{user_id}/meals/{meal_id}").json() == {
        "id": meal_id,
        **update,
    }


def test_update_meal_under_wrong_user_is_404(client):
    owner = create_user_via_api(client)
    other = create_user_via_api(client, profile_type="athlete")
    meal_id = create_meal_via_api(client, owner)

    r = client.put(f"{API}/users/{other}/meals/{meal_id}", json=meal_payload("dinner"))

    assert r.status_code == 404
    assert client.get(f"{API}/users/{owner}/meals/{meal_id}").json()["calories"] == 400


def test_update_meal_missing_field_is_400(client):
    user_id = create_user_via_api(client)
    meal_id = create_meal_via_api(client, user_id)

    r = client.put(
        f"{API}/users/{user_id}/meals/{meal_id}", json={"description": "Pasta"}
    )

    assert r.status_code == 400


def test_delete_meal_twice_is_204_then_404(client):
    user_id = create_user_via_api(client)
    meal_id = create_meal_via_api(client, user_id)

    first = client.delete(f"{API}/users/{user_id}/meals/{meal_id}")
    second = client.delete(f"{API}/users/{user_id}/meals/{meal_id}")

    assert first.status_code == 204
    assert second.status_code == 404
    assert client.get(f"{API}/users/{user_id}/meals/{meal_id}").status_code == 404


def test_delete_meal_under_wrong_user_leaves_it_active(client):
    owner = create_user_via_api(client)
    other = create_user_via_api(client, profile_type="athlete")
    meal_id = create_meal_via_api(client, owner)

    assert client.delete(f"{API}/users/{other}/meals/{meal_id}").status_code == 404
    assert client.get(f"{API}/users/{owner}/meals/{meal_id}").status_code == 200


def test_meal_date_with_offset_round_trips_as_utc(client):
    user_id = create_user_via_api(client)

    r = client.post(
        f"{API}/users/{user_id}/meals",
        json=meal_payload(date="2021-02-12T12:30:00+02:00"),
    )

    assert r.status_code == 201
    echoed = r.json()
    assert echoed["date"] == "2021-02-12T10:30:00"
    fetched = client.get(r.headers["location"]).json()
    assert fetched["date"] == echoed["date"]


def test_update_meal_date_with_offset_is_stored_as_utc(client):
    user_id = create_user_via_api(client)
    meal_id = create_meal_via_api(client, user_id)
    update = {"description": "Pasta", "calories": 800, "date": "2021-03-01T20:00:00Z"}

    r = client.put(f"{API}/users/{user_id}/meals/{meal_id}", json=update)

    assert r.status_code == 204
    fetched = client.get(f"{API}/users/{user_id}/meals/{meal_id}").json()
    assert fetched["date"] == "2021-03-01T20:00:00"
