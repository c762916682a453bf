"""Unit tests for toolkit operations and the keyword mentor."""

import random
import pytest
from datetime import timedelta

from common.utils.exceptions import ConflictException, NotFoundException, ValidationException
from forge.models import DIFFICULTIES, QUEST_TYPES, Tool
from forge.services.mentor import KeywordMentorResponder
from forge.services.tools import (
    add_suggested_tool,
    add_tool,
    create_custom_tool,
    filter_suggestions,
    remove_tool,
)


# ─────────────────────────────────────────────────────────────────
# Toolkit
# ─────────────────────────────────────────────────────────────────


class TestToolkit:
    def test_filter_excludes_owned_tools(self, sample_path):
        suggested = sample_path.suggestedTools
        owned = [suggested[0]]
        assert [t.id for t in filter_suggestions(suggested, owned)] == ["tool-2"]

    @pytest.mark.parametrize("query,expected", [
        ("PIANO", ["tool-1"]),
        ("practice", ["tool-2"]),
        ("tempo", ["tool-2"]),
        ("   ", ["tool-1", "tool-2"]),
        ("violin", []),
    ])
    def test_filter_query(self, sample_path, query, expected):
        result = filter_suggestions(sample_path.suggestedTools, [], query)
        assert [t.id for t in result] == expected

    def test_add_suggested_copies_tool(self, sample_path):
        tools = add_suggested_tool([], sample_path.suggestedTools, "tool-2")
        assert tools == [sample_path.suggestedTools[1]]

    def test_add_duplicate_conflicts(self, sample_path):
        tools = add_suggested_tool([], sample_path.suggestedTools, "tool-1")
        with pytest.raises(ConflictException):
            add_suggested_tool(tools, sample_path.suggestedTools, "tool-1")

    def test_add_unknown_suggestion(self, sample_path):
        with pytest.raises(NotFoundException):
            add_suggested_tool([], sample_path.suggestedTools, "tool-99")

    def test_custom_tool_defaults(self):
        tool = create_custom_tool("  Logbook ", now_ms=1700000000000)
        assert tool.id == "custom-1700000000000"
        assert tool.name == "Logbook"
        assert tool.category == "Custom"
        assert tool.isCustom is True
        assert tool.url is None

    def test_custom_tool_id_skips_taken_stamps(self):
        tool = create_custom_tool(
            "Logbook",
            now_ms=1700000000000,
            taken_ids=["custom-1700000000000", "custom-1700000000001"],
        )
        assert tool.id == "custom-1700000000002"

    def test_custom_tool_requires_name(self):
        with pytest.raises(ValidationException) as exc_info:
            create_custom_tool("  ")
        assert exc_info.value.code == "TOOL_NAME_REQUIRED"

    def test_remove_tool(self):
        tools = add_tool([], Tool(id="a", name="A"))
        assert remove_tool(tools, "a") == []
        with pytest.raises(NotFoundException):
            remove_tool(tools, "b")


# ─────────────────────────────────────────────────────────────────
# KeywordMentorResponder
# ─────────────────────────────────────────────────────────────────


class TestKeywordMentorResponder:
    def test_greeting_uses_name(self):
        responder = KeywordMentorResponder()
        assert responder.greeting("Ada").startswith("Hello Ada!")
        assert responder.greeting(None).startswith("Hello there!")

    def test_goal_message_generates_quest(self, seeded_rng, now):
        responder = KeywordMentorResponder(rng=seeded_rng)

        reply = responder.respond("i want to run 5k", now)

        quest = reply.quest
        assert reply.content == KeywordMentorResponder.QUEST_REPLY
        assert quest.title == "Quest: I want to run 5k"
        assert quest.status == "active"
        assert quest.type in QUEST_TYPES
        assert quest.difficulty in DIFFICULTIES
        assert 25 <= quest.xpReward <= 74
        assert quest.deadline == now + timedelta(days=7)

    @pytest.mark.parametrize("message,keyword", [
        ("I'm stuck on chords", "challenging"),
        ("I always procrastinate", "Procrastination"),
        ("How do I focus better?", "Pomodoro"),
    ])
    def test_keyword_replies(self, message, keyword):
        reply = KeywordMentorResponder().respond(message)
        assert keyword in reply.content
        assert reply.quest is None

    def test_default_reply_is_seeded(self):
        first = KeywordMentorResponder(rng=random.Random(7)).respond("hello")
        second = KeywordMentorResponder(rng=random.Random(7)).respond("hello")

        assert first.content == second.content
        assert first.content in KeywordMentorResponder.DEFAULT_REPLIES
