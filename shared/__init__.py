"""Shared utilities and components for the tracker services."""

from .config import BaseLoggingConfig, BaseRedisConfig, BaseServiceConfig
from .constants import Environment, TrackerKeys

__all__ = [
    "Environment",
    "TrackerKeys",
    "BaseServiceConfig",
    "BaseLoggingConfig",
    "BaseRedisConfig",
]
