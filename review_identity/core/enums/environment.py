"""Deployment environment."""

from enum import Enum


class Environment(str, Enum):
    """Where the service runs.

    Production requires a signing secret. Only development logs in the
    human-readable format.
    """

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"

    @property
    def uses_json_logs(self) -> bool:
        return self is not Environment.DEVELOPMENT
