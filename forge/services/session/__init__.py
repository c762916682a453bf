"""
Session state persistence.
"""

from forge.services.session.state_repository import SessionStateRepository

__all__ = ["SessionStateRepository"]
