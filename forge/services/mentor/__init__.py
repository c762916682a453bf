"""
Mentor dialogue (pluggable response selection).
"""

from forge.services.mentor.responder import (
    MentorReply,
    MentorResponder,
    KeywordMentorResponder,
)

__all__ = ["MentorReply", "MentorResponder", "KeywordMentorResponder"]
