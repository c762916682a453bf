"""Unit tests for learning path progress, reshaping and the fallback path."""

import pytest

from common.utils.exceptions import NotFoundException
from forge.models import Milestone, Task
from forge.services.learning import (
    build_fallback_path,
    milestone_percentage,
    path_percentage,
    reshape_learning_path,
    summarize_progress,
    toggle_path_task,
    toggle_task,
)


def _milestone(done, total):
    return Milestone(
        id="m",
        title="M",
        order=1,
        tasks=[Task(id=str(i), title=f"Task {i}", completed=i < done) for i in range(total)],
    )


# ─────────────────────────────────────────────────────────────────
# Progress roll-up
# ─────────────────────────────────────────────────────────────────


class TestPercentages:
    def test_empty_milestone_is_zero(self):
        assert milestone_percentage(_milestone(0, 0)) == 0

    def test_half_done(self):
        assert milestone_percentage(_milestone(2, 4)) == 50

    def test_rounds_half_up(self):
        # 1/8 = 12.5%
        assert milestone_percentage(_milestone(1, 8)) == 13

    def test_thirds(self):
        assert milestone_percentage(_milestone(1, 3)) == 33
        assert milestone_percentage(_milestone(2, 3)) == 67

    def test_path_counts_tasks_not_milestones(self, sample_path):
        path = toggle_path_task(sample_path, "m2", "t4")
        # 1 of 4 tasks, although one of two milestones is done
        assert path_percentage(path.milestones) == 25

    def test_empty_path_is_zero(self):
        assert path_percentage([]) == 0


class TestToggleTask:
    def test_toggle_twice_restores(self, sample_path):
        once = toggle_path_task(sample_path, "m1", "t2")
        twice = toggle_path_task(once, "m1", "t2")
        assert once.milestones[0].tasks[1].completed is True
        assert twice == sample_path

    def test_other_milestones_untouched(self, sample_path):
        path = toggle_path_task(sample_path, "m1", "t1")
        assert path.milestones[1] == sample_path.milestones[1]
        assert sample_path.milestones[0].tasks[0].completed is False

    def test_unknown_task(self, sample_path):
        with pytest.raises(NotFoundException) as exc_info:
            toggle_task(sample_path.milestones[0], "nope")
        assert exc_info.value.code == "TASK_NOT_FOUND"

    def test_unknown_milestone(self, sample_path):
        with pytest.raises(NotFoundException) as exc_info:
            toggle_path_task(sample_path, "m9", "t1")
        assert exc_info.value.code == "MILESTONE_NOT_FOUND"


class TestSummarizeProgress:
    def test_summary_shape(self, sample_path):
        path = toggle_path_task(sample_path, "m1", "t1")
        path = toggle_path_task(path, "m1", "t2")

        summary = summarize_progress(path)

        assert summary["overall"] == 50
        assert summary["completedTasks"] == 2
        assert summary["totalTasks"] == 4
        assert summary["milestones"][0] == {
            "milestoneId": "m1",
            "title": "Basics",
            "order": 1,
            "completed": 2,
            "total": 3,
            "percentage": 67,
        }
        assert summary["milestones"][1]["percentage"] == 0


# ─────────────────────────────────────────────────────────────────
# Fallback path
# ─────────────────────────────────────────────────────────────────


class TestFallbackPath:
    def test_shape_for_learn_piano(self):
        path = build_fallback_path("learn piano")

        assert path.goal == "learn piano"
        assert len(path.milestones) == 3
        assert all(len(m.tasks) == 3 for m in path.milestones)
        assert len(path.suggestedTools) == 3
        assert [m.order for m in path.milestones] == [1, 2, 3]
        assert not any(t.completed for m in path.milestones for t in m.tasks)

    def test_deterministic(self):
        assert build_fallback_path("learn piano") == build_fallback_path("learn piano")

    def test_goal_is_woven_into_text(self):
        path = build_fallback_path("  run a marathon ")
        assert path.goal == "run a marathon"
        assert "run a marathon" in path.milestones[0].description

    def test_unique_ids(self):
        path = build_fallback_path("learn piano")
        task_ids = [t.id for m in path.milestones for t in m.tasks]
        assert len(task_ids) == len(set(task_ids))
        assert [t.id for t in path.suggestedTools] == ["tool-1", "tool-2", "tool-3"]


# ─────────────────────────────────────────────────────────────────
# Payload reshaping
# ─────────────────────────────────────────────────────────────────


class TestReshapeLearningPath:
    def test_synthesizes_ids_and_defaults(self):
        data = {
            "milestones": [
                {
                    "title": "Start",
                    "description": "Begin",
                    "tasks": [{"title": "One", "completed": True}, {"title": "Two"}],
                },
                {"title": "Next", "tasks": []},
            ],
            "tools": [{"name": "Anki", "description": "Flashcards"}],
        }

        path = reshape_learning_path("learn piano", data)

        assert [m.id for m in path.milestones] == ["milestone-1", "milestone-2"]
        assert [m.order for m in path.milestones] == [1, 2]
        assert [t.id for t in path.milestones[0].tasks] == ["1-1", "1-2"]
        assert path.milestones[0].tasks[0].completed is False
        assert path.suggestedTools[0].id == "tool-1"
        assert path.suggestedTools[0].category == "General"
        assert path.goal == "learn piano"

    def test_keeps_provided_ids_and_suggested_tools(self):
        data = {
            "goal": "Piano",
            "milestones": [{"id": "a", "title": "A", "order": 2, "tasks": [{"id": "x", "title": "X"}]}],
            "suggestedTools": [{"id": "t", "name": "Tool", "category": "Practice"}],
        }

        path = reshape_learning_path("learn piano", data)

        assert path.goal == "Piano"
        assert path.milestones[0].id == "a"
        assert path.milestones[0].order == 2
        assert path.milestones[0].tasks[0].id == "x"
        assert path.suggestedTools[0].category == "Practice"

    def test_repeated_ids_replaced(self):
        data = {
            "milestones": [
                {"id": "m", "title": "A", "tasks": [{"id": "task"}, {"id": "task"}, {}]},
                {"id": "m", "title": "B", "tasks": [{"id": "task"}]},
            ],
            "tools": [{"id": "t", "name": "One"}, {"id": "t", "name": "Two"}],
        }

        path = reshape_learning_path("learn piano", data)

        assert [m.id for m in path.milestones] == ["m", "milestone-2"]
        assert [t.id for t in path.milestones[0].tasks] == ["task", "1-2", "1-3"]
        assert [t.id for t in path.milestones[1].tasks] == ["2-1"]
        assert [t.id for t in path.suggestedTools] == ["t", "tool-2"]

    def test_toggle_after_reshape_flips_one_task(self):
        data = {"milestones": [{"id": "m", "title": "A", "tasks": [{"id": "task"}, {"id": "task"}, {}]}]}
        path = reshape_learning_path("learn piano", data)

        toggled = toggle_path_task(path, "m", "task")

        assert summarize_progress(toggled)["milestones"][0]["completed"] == 1

    def test_missing_milestones_rejected(self):
        with pytest.raises(ValueError):
            reshape_learning_path("goal", {"tools": []})
