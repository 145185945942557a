from .environments import Environment
from .redis_keys import TrackerKeys

__all__ = ["Environment", "TrackerKeys"]
