"""
IContactRepository - Port: defines the contact persistence contract.
The domain doesn't know about SQLAlchemy, SQLite, or any other engine.
"""

from abc import ABC, abstractmethod
from typing import List

from ..entities.contact import Contact


class IContactRepository(ABC):
    """Port for writing and reading Contact records."""

    @abstractmethod
    def save(self, contact: Contact) -> int:
        """Insert the contact as a new row and return the generated key."""
        pass

    @abstractmethod
    def fetch_all(self) -> List[Contact]:
        """Retrieve every contact in the data store, in storage order."""
        pass
