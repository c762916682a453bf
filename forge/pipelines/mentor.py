"""
Mentor dialogue pipeline functions.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from common.utils.exceptions import ValidationException
from forge.pipelines.quests import format_quest
from forge.services.mentor import MentorResponder
from forge.services.session import SessionStateRepository

logger = logging.getLogger(__name__)


async def greeting_pipeline(
    repository: SessionStateRepository,
    responder: MentorResponder,
    session_id: str,
) -> Dict[str, Any]:
    """Opening mentor message, addressed by profile name when one exists."""
    profile = await repository.load_profile(session_id)
    name = profile.name if profile else None
    return {"role": "mentor", "content": responder.greeting(name)}


async def send_message_pipeline(
    repository: SessionStateRepository,
    responder: MentorResponder,
    session_id: str,
    message: str,
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    """
    Reply to a user message. A generated quest is appended to the
    session's quest collection.

    Returns:
        dict with the mentor reply and the generated quest (or None)
    """
    message = (message or "").strip()
    if not message:
        raise ValidationException(message="Message is required", code="MESSAGE_REQUIRED")

    now = now or datetime.now(timezone.utc)
    reply = responder.respond(message, now)

    if reply.quest is not None:
        async with repository.lock(session_id):
            quests = await repository.load_quests(session_id)
            quests.append(reply.quest)
            await repository.save_quests(session_id, quests)
        logger.info(f"Mentor generated quest {reply.quest.id} for session {session_id}")

    return {
        "role": "mentor",
        "content": reply.content,
        "quest": format_quest(reply.quest, now) if reply.quest else None,
    }
