"""
Configuration module - environment-driven settings shared by every app.

Apps subclass BaseAppSettings and add their own fields (see forge.config).
"""

from common.config.base_settings import BaseAppSettings

__all__ = ["BaseAppSettings"]
