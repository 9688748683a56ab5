"""Tests for goal management."""

import math

import pytest

from diet_tracker.domain.nutrients import Nutrient, default_config
from diet_tracker.services.goals import GoalService


def test_first_access_creates_default_goals(goal_repository, user_id) -> None:
    service = GoalService(goal_repository)

    goals = service.get_goals(user_id)

    assert goals == default_config().default_goals()
    assert goal_repository.created == [user_id]


def test_stored_goals_override_defaults(goal_repository, user_id) -> None:
    goal_repository.goals[user_id] = {Nutrient.IRON: 8.0}
    service = GoalService(goal_repository)

    goals = service.get_goals(user_id)

    assert goals[Nutrient.IRON] == 8.0
    assert goals[Nutrient.CALCIUM] == 1000
    assert goal_repository.created == []


def test_update_merges_changes(goal_repository, user_id) -> None:
    service = GoalService(goal_repository)

    updated = service.update_goals(user_id, {Nutrient.PROTEIN: 120.0})

    assert updated[Nutrient.PROTEIN] == 120.0
    assert updated[Nutrient.FIBER] == 28
    assert goal_repository.goals[user_id][Nutrient.PROTEIN] == 120.0


def test_update_rejects_non_finite_values(goal_repository, user_id) -> None:
    service = GoalService(goal_repository)

    with pytest.raises(ValueError):
        service.update_goals(user_id, {Nutrient.ZINC: math.nan})
    assert user_id not in goal_repository.goals
