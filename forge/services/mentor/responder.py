"""
Mentor dialogue responses.

Not part of progression: replies are canned, picked by keyword, with a
random fallback. Any object with the MentorResponder shape can replace
KeywordMentorResponder (for example an LLM-backed responder).
"""

import random
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional, Protocol

from forge.models.quest import Quest, QUEST_TYPES, DIFFICULTIES
from forge.services.quests.lifecycle import create_quest


@dataclass
class MentorReply:
    """A mentor reply, optionally carrying a generated quest."""
    content: str
    quest: Optional[Quest] = None


class MentorResponder(Protocol):
    def greeting(self, name: Optional[str] = None) -> str:
        ...

    def respond(self, message: str, now: Optional[datetime] = None) -> MentorReply:
        ...


class KeywordMentorResponder:
    """
    Keyword-matched mentor replies.

    Goal phrases also produce a quest built from the message.
    """

    GOAL_TRIGGERS = ("goal", "want to", "need to")

    RULES = [
        (
            ("stuck", "difficult", "hard"),
            "I understand it feels challenging right now. Remember, every expert was once a beginner. "
            "Let's break this down into smaller, manageable steps. What specific part is causing you the most difficulty?",
        ),
        (
            ("procrastinate", "motivation"),
            "Procrastination is often fear in disguise. Let's tackle this with a micro-habit approach. "
            "What's the smallest step you could take right now that would move you forward?",
        ),
        (
            ("productive", "focus"),
            "Great question! Here are some proven techniques: 1) Use the Pomodoro Technique (25min focused work + 5min break), "
            "2) Eliminate distractions, 3) Set clear priorities for the day. Which resonates most with you?",
        ),
    ]

    QUEST_REPLY = "That sounds like a great goal! Let me create a personalized quest to help you achieve it. 🎯"

    DEFAULT_REPLIES = [
        "That's an interesting perspective! How does this relate to your current goals?",
        "I appreciate you sharing that. What action step could you take based on this insight?",
        "Excellent! Building on that thought, what would success look like for you?",
        "That shows great self-awareness. How can we turn this into a learning opportunity?",
        "I see the potential here. What resources or support do you need to move forward?",
    ]

    QUEST_DEADLINE_DAYS = 7
    MIN_QUEST_XP = 25
    MAX_QUEST_XP = 74

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()

    def greeting(self, name: Optional[str] = None) -> str:
        return (
            f"Hello {name or 'there'}! I'm your AI mentor, here to help you achieve your goals "
            "through personalized quests and guidance. What would you like to work on today?"
        )

    def respond(self, message: str, now: Optional[datetime] = None) -> MentorReply:
        lowered = message.lower()

        if any(trigger in lowered for trigger in self.GOAL_TRIGGERS):
            return MentorReply(content=self.QUEST_REPLY, quest=self.suggest_quest(message, now))

        for keywords, reply in self.RULES:
            if any(keyword in lowered for keyword in keywords):
                return MentorReply(content=reply)

        return MentorReply(content=self._rng.choice(self.DEFAULT_REPLIES))

    def suggest_quest(self, message: str, now: Optional[datetime] = None) -> Quest:
        """Build an active quest from a goal message."""
        now = now or datetime.now(timezone.utc)
        text = message.strip()
        headline = text[:1].upper() + text[1:]

        return create_quest(
            title=f"Quest: {headline}",
            description=f"Complete this personalized challenge based on your goal: {text}",
            quest_type=self._rng.choice(QUEST_TYPES),
            difficulty=self._rng.choice(DIFFICULTIES),
            xp_reward=self._rng.randint(self.MIN_QUEST_XP, self.MAX_QUEST_XP),
            deadline=now + timedelta(days=self.QUEST_DEADLINE_DAYS),
            now=now,
        )
