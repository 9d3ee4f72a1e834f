"""
Dependency Injection Container.
Wires the database runtime, the repository adapter and the use cases.
This is the ONLY place that knows about concrete implementations.
"""

from .config import Config
from .database import apply_schema_policy, build_database_url, create_engine_and_sessionmaker
from ..adapters.sqlalchemy_adapter import SQLAlchemyContactAdapter
from ..use_cases.add_contact import AddContactUseCase
from ..use_cases.list_contacts import ListContactsUseCase


class Container:
    """
    Composes the full application object graph.
    The database runtime is created here once and lives until close().
    """

    def __init__(self, config: Config):
        self.config = config

        # ── Infrastructure ────────────────────────────────────────────────
        self.db = create_engine_and_sessionmaker(
            build_database_url(config),
            echo=config.sql_echo,
        )
        apply_schema_policy(self.db.engine, config.schema_policy)

        # ── Adapters (Ports & Adapters layer) ─────────────────────────────
        self.repository = SQLAlchemyContactAdapter(session_factory=self.db.SessionLocal)

        # ── Use Cases (Application layer) ──────────────────────────────────
        self.add_contact_use_case = AddContactUseCase(repository=self.repository)
        self.list_contacts_use_case = ListContactsUseCase(repository=self.repository)

    def close(self) -> None:
        self.db.dispose()
