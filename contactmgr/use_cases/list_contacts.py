"""
ListContactsUseCase - Returns every stored contact.
"""

import logging
from dataclasses import dataclass, field
from typing import List

from ..domain.entities.contact import Contact
from ..domain.interfaces.i_contact_repository import IContactRepository

logger = logging.getLogger(__name__)


@dataclass
class ListContactsResponse:
    contacts: List[Contact] = field(default_factory=list)


class ListContactsUseCase:
    def __init__(self, repository: IContactRepository):
        self.repository = repository

    def execute(self) -> ListContactsResponse:
        contacts = self.repository.fetch_all()
        logger.info(f"Loaded {len(contacts)} contact(s)")
        return ListContactsResponse(contacts=contacts)
