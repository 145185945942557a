from enum import Enum


class Environment(str, Enum):
    """Deployment environments a tracker service can run in."""

    PRODUCTION = "production"
    STAGING = "staging"
    TESTING = "testing"
    DEVELOPMENT = "development"

    @classmethod
    def matches(cls, env: str, expected: "Environment") -> bool:
        return env.strip().lower() == expected.value

    @classmethod
    def is_development(cls, env: str) -> bool:
        """Human-readable logs are used in development only."""
        return cls.matches(env, cls.DEVELOPMENT)
