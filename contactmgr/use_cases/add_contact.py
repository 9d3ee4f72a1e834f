"""
AddContactUseCase - Builds a Contact from the request and persists it.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ..domain.entities.contact import Contact, ContactBuilder
from ..domain.interfaces.i_contact_repository import IContactRepository

logger = logging.getLogger(__name__)


@dataclass
class AddContactRequest:
    first_name: str
    last_name: str
    email: Optional[str] = None
    phone: Optional[int] = None


@dataclass
class AddContactResponse:
    contact_id: int
    contact: Contact


class AddContactUseCase:
    def __init__(self, repository: IContactRepository):
        self.repository = repository

    def execute(self, request: AddContactRequest) -> AddContactResponse:
        builder = ContactBuilder(request.first_name, request.last_name)
        if request.email is not None:
            builder.with_email(request.email)
        if request.phone is not None:
            builder.with_phone(request.phone)
        contact = builder.build()

        contact_id = self.repository.save(contact)
        logger.info(f"Added contact #{contact_id}")
        return AddContactResponse(contact_id=contact_id, contact=contact)
