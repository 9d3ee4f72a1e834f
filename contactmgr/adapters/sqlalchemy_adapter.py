"""
SQLAlchemyContactAdapter - Implements IContactRepository.
Uses the SQLAlchemy ORM to insert and read contact rows.
Each call runs in its own short-lived session; the session factory is injected.
"""

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import sessionmaker

from ..domain.entities.contact import Contact
from ..domain.interfaces.i_contact_repository import IContactRepository
from ..infrastructure.database import ContactRow

logger = logging.getLogger(__name__)


def _row_to_contact(row: ContactRow) -> Contact:
    return Contact(
        id=row.id,
        first_name=row.first_name,
        last_name=row.last_name,
        email=row.email,
        phone=row.phone,
    )


def _contact_to_row(contact: Contact) -> ContactRow:
    # id is left out: the database assigns it on insert
    return ContactRow(
        first_name=contact.first_name,
        last_name=contact.last_name,
        email=contact.email,
        phone=contact.phone,
    )


class SQLAlchemyContactAdapter(IContactRepository):
    """
    Relational adapter via the SQLAlchemy ORM.
    Database errors are not caught here; they roll back the session and propagate.
    """

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def save(self, contact: Contact) -> int:
        row = _contact_to_row(contact)
        with self.session_factory() as session:
            with session.begin():
                session.add(row)
                session.flush()
                contact_id = row.id

        contact.id = contact_id
        logger.info(f"Saved contact id={contact_id}: {contact.first_name} {contact.last_name}")
        return contact_id

    def fetch_all(self) -> List[Contact]:
        with self.session_factory() as session:
            rows = session.scalars(select(ContactRow)).all()
            contacts = [_row_to_contact(r) for r in rows]

        logger.debug(f"Fetched {len(contacts)} contact(s)")
        return contacts
