"""
Configuration — reads all settings from environment variables.
Never hardcodes credentials. Uses python-dotenv for local dev.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

SCHEMA_POLICIES = ("create", "update", "none")

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Config:
    # Database connection
    database_url: str
    database_username: str = ""
    database_password: str = ""

    # Schema management: create | update | none
    schema_policy: str = "update"

    # Log every SQL statement
    sql_echo: bool = False

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "Config":
        if env_file:
            load_dotenv(env_file, override=True)

        missing = []
        required = [
            "DATABASE_URL",
        ]
        for key in required:
            if not os.getenv(key):
                missing.append(key)

        if missing:
            raise EnvironmentError(
                f"Missing required environment variables: {', '.join(missing)}\n"
                f"Copy .env.example to .env and fill in the values."
            )

        schema_policy = os.getenv("SCHEMA_POLICY", "update").strip().lower()
        if schema_policy not in SCHEMA_POLICIES:
            raise ValueError(
                f"Unknown SCHEMA_POLICY {schema_policy!r}; "
                f"expected one of: {', '.join(SCHEMA_POLICIES)}"
            )

        return cls(
            database_url=os.environ["DATABASE_URL"],
            database_username=os.getenv("DATABASE_USERNAME", ""),
            database_password=os.getenv("DATABASE_PASSWORD", ""),
            schema_policy=schema_policy,
            sql_echo=os.getenv("SQL_ECHO", "false").strip().lower() in _TRUTHY,
        )
