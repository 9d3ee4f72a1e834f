"""
Root conftest.py — shared fixtures and helpers for the entire test suite.

Provides:
- Contact factory helper
- Mock repository factory (for use-case tests)
- In-memory repository fake (for integration-style unit tests)
- SQLite-backed database runtime fixtures (for adapter tests)
"""

from typing import List, Optional
from unittest.mock import MagicMock

import pytest

from contactmgr.domain.entities.contact import Contact
from contactmgr.domain.interfaces.i_contact_repository import IContactRepository
from contactmgr.infrastructure.database import apply_schema_policy, create_engine_and_sessionmaker


# ─────────────────────────────────────────────────────────────────────────────
# Domain object factories
# ─────────────────────────────────────────────────────────────────────────────


def make_contact(
    first_name: Optional[str] = "Moo",
    last_name: Optional[str] = "Mee",
    email: Optional[str] = "moo@something.com",
    phone: Optional[int] = 888776543,
    contact_id: int = 0,
) -> Contact:
    """Create a Contact with sensible test defaults."""
    return Contact(
        id=contact_id,
        first_name=first_name,
        last_name=last_name,
        email=email,
        phone=phone,
    )


# ─────────────────────────────────────────────────────────────────────────────
# Repository doubles
# ─────────────────────────────────────────────────────────────────────────────


def make_mock_repository(save_returns: int = 1, fetch_returns: Optional[List[Contact]] = None) -> MagicMock:
    """MagicMock constrained to the IContactRepository interface."""
    repo = MagicMock(spec=IContactRepository)
    repo.save.return_value = save_returns
    repo.fetch_all.return_value = fetch_returns if fetch_returns is not None else []
    return repo


class InMemoryContactRepository(IContactRepository):
    """Dict-backed fake that mimics the adapter's key assignment and copy-out semantics."""

    def __init__(self):
        self.rows = {}
        self._next_id = 1

    def save(self, contact: Contact) -> int:
        contact_id = self._next_id
        self._next_id += 1
        self.rows[contact_id] = (contact.first_name, contact.last_name, contact.email, contact.phone)
        contact.id = contact_id
        return contact_id

    def fetch_all(self) -> List[Contact]:
        return [
            Contact(id=cid, first_name=f, last_name=l, email=e, phone=p)
            for cid, (f, l, e, p) in self.rows.items()
        ]


# ─────────────────────────────────────────────────────────────────────────────
# Database fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def db_runtime(tmp_path):
    """A freshly created SQLite file database with the contact table in place."""
    runtime = create_engine_and_sessionmaker(f"sqlite:///{tmp_path / 'contacts.db'}")
    apply_schema_policy(runtime.engine, "create")
    yield runtime
    runtime.dispose()


@pytest.fixture
def session_factory(db_runtime):
    return db_runtime.SessionLocal
