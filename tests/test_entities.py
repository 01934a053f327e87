"""
Tests for the entity lifecycle: construction, named updates and soft-delete.
"""

from datetime import datetime, timezone

from test_fixtures import make_user, make_meal


def test_new_user_is_active_with_creation_time():
    before = datetime.now(timezone.utc)
    user = make_user()
    after = datetime.now(timezone.utc)

    assert user.id is None
    assert user.active is True
    assert before <= user.created_at <= after


def test_user_update_changes_only_measurements():
    user = make_user(full_name="Ann Lee", height=1.70, weight=60.0)
    created_at = user.created_at

    user.update(1.72, 58.5)

    assert user.height == 1.72
    assert user.weight == 58.5
    assert user.full_name == "Ann Lee"
    assert user.birth_date == datetime(1990, 1, 1)
    assert user.created_at == created_at
    assert user.active is True


def test_user_update_does_not_validate_values():
    user = make_user()
    user.update(-1.0, 0)
    assert user.height == -1.0
    assert user.weight == 0


def test_meal_update_keeps_owner():
    meal = make_meal(user_id=7)

    meal.update("Pasta", 800, datetime(2021, 3, 1, 20, 0))

    assert meal.description == "Pasta"
    assert meal.calories == 800
    assert meal.date == datetime(2021, 3, 1, 20, 0)
    assert meal.user_id == 7


def test_deactivate_is_idempotent():
    meal = make_meal(user_id=1)

    meal.deactivate()
    assert meal.active is False

    meal.deactivate()
    assert meal.active is False


def test_deactivate_is_shared_by_users():
    user = make_user()
    user.deactivate()
    assert user.active is False
