"""Unit tests for quest lifecycle transitions."""

import pytest
from datetime import timedelta

from common.utils.exceptions import InvalidStateException, ValidationException
from forge.services.quests import (
    complete_quest,
    create_quest,
    days_until_deadline,
    fail_quest,
    update_quest_progress,
)


class TestCreateQuest:
    def test_creates_active_quest(self, now):
        quest = create_quest(
            title="  Stretch  ",
            quest_type="habit",
            difficulty="Easy",
            xp_reward=20,
            now=now,
        )
        assert quest.status == "active"
        assert quest.title == "Stretch"
        assert quest.createdAt == now
        assert quest.progress is None
        assert len(quest.id) == 32

    def test_trackable_quest_starts_at_zero(self, now):
        quest = create_quest("Lessons", "learning", "Medium", 40, max_progress=3, now=now)
        assert quest.progress == 0
        assert quest.is_trackable

    def test_blank_title_rejected(self):
        with pytest.raises(ValidationException) as exc_info:
            create_quest("   ", "daily", "Easy", 10)
        assert exc_info.value.code == "QUEST_TITLE_REQUIRED"


class TestCompleteQuest:
    def test_active_to_completed(self, active_quest):
        transition = complete_quest(active_quest)
        assert transition.completed is True
        assert transition.quest.status == "completed"
        assert active_quest.status == "active"

    @pytest.mark.parametrize("status", ["completed", "failed"])
    def test_terminal_quest_rejected(self, active_quest, status):
        quest = active_quest.model_copy(update={"status": status})
        with pytest.raises(InvalidStateException) as exc_info:
            complete_quest(quest)
        assert exc_info.value.code == "INVALID_QUEST_STATE"
        assert exc_info.value.status_code == 422
        assert quest.status == status


class TestFailQuest:
    def test_active_to_failed_without_award(self, active_quest):
        transition = fail_quest(active_quest)
        assert transition.completed is False
        assert transition.quest.status == "failed"

    def test_failed_is_absorbing(self, active_quest):
        failed = fail_quest(active_quest).quest
        with pytest.raises(InvalidStateException):
            fail_quest(failed)


class TestUpdateQuestProgress:
    def test_partial_progress(self, trackable_quest):
        transition = update_quest_progress(trackable_quest, 3)
        assert transition.quest.progress == 3
        assert transition.quest.status == "active"
        assert transition.completed is False

    def test_overshoot_clamps_and_completes_once(self, trackable_quest):
        transition = update_quest_progress(trackable_quest, 99)
        assert transition.quest.progress == 5
        assert transition.quest.status == "completed"
        assert transition.completed is True

        with pytest.raises(InvalidStateException):
            update_quest_progress(transition.quest, 5)

    def test_negative_clamped_to_zero(self, trackable_quest):
        transition = update_quest_progress(trackable_quest, -4)
        assert transition.quest.progress == 0

    def test_untracked_quest_rejected(self, active_quest):
        with pytest.raises(ValidationException) as exc_info:
            update_quest_progress(active_quest, 1)
        assert exc_info.value.code == "QUEST_NOT_TRACKABLE"


class TestDaysUntilDeadline:
    def test_no_deadline(self, active_quest, now):
        assert days_until_deadline(active_quest, now) is None

    def test_rounds_partial_days_up(self, active_quest, now):
        quest = active_quest.model_copy(update={"deadline": now + timedelta(days=2, hours=1)})
        assert days_until_deadline(quest, now) == 3

    def test_past_deadline_is_negative(self, active_quest, now):
        quest = active_quest.model_copy(update={"deadline": now - timedelta(days=2)})
        assert days_until_deadline(quest, now) == -2
