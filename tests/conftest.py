"""Shared test fixtures for Quest Forge tests."""

import random
import pytest
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

from common.storage.memory import MemoryKeyValueStore
from forge.models import Quest, LearningPath, Milestone, Task, Tool, UserStats
from forge.services.session import SessionStateRepository


@pytest.fixture
def now():
    return datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def session_id():
    return "session-abc"


@pytest.fixture
def store():
    return MemoryKeyValueStore()


@pytest.fixture
def repository(store):
    return SessionStateRepository(store)


@pytest.fixture
def fresh_stats():
    return UserStats()


@pytest.fixture
def active_quest(now):
    return Quest(
        id="quest-1",
        title="Read for 30 minutes",
        description="Any book counts",
        type="daily",
        difficulty="Easy",
        xpReward=150,
        status="active",
        createdAt=now,
    )


@pytest.fixture
def trackable_quest(now):
    return Quest(
        id="quest-2",
        title="Finish 5 lessons",
        type="learning",
        difficulty="Medium",
        xpReward=50,
        status="active",
        progress=0,
        maxProgress=5,
        createdAt=now,
    )


@pytest.fixture
def sample_path():
    return LearningPath(
        goal="learn piano",
        milestones=[
            Milestone(
                id="m1",
                title="Basics",
                description="Get started",
                order=1,
                tasks=[
                    Task(id="t1", title="Learn the keys"),
                    Task(id="t2", title="Learn scales"),
                    Task(id="t3", title="Play a song"),
                ],
            ),
            Milestone(
                id="m2",
                title="Practice",
                description="Keep going",
                order=2,
                tasks=[Task(id="t4", title="Practice daily")],
            ),
        ],
        suggestedTools=[
            Tool(id="tool-1", name="Simply Piano", category="Learning", description="Piano lessons app"),
            Tool(id="tool-2", name="Metronome", category="Practice", description="Keeps tempo"),
        ],
    )


@pytest.fixture
def seeded_rng():
    return random.Random(42)


@pytest.fixture
def mock_ai_provider():
    provider = MagicMock()
    provider.complete = AsyncMock()
    return provider
