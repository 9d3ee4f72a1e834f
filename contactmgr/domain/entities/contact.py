"""
Contact Entity - Core domain object.
No framework dependencies. The ORM mapping lives in the infrastructure layer.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Contact:
    """
    A single contact record.
    `id` stays 0 until the record has been saved and the database assigned a key.
    """

    id: int = 0
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[int] = None

    @classmethod
    def from_builder(cls, builder: "ContactBuilder") -> "Contact":
        """Copy the builder's fields verbatim into a fresh, unsaved Contact."""
        return cls(
            first_name=builder.first_name,
            last_name=builder.last_name,
            email=builder.email,
            phone=builder.phone,
        )

    def __str__(self) -> str:
        return (
            f"Contact{{id={self.id}, "
            f"firstName='{self.first_name}', "
            f"lastName='{self.last_name}', "
            f"email='{self.email}', "
            f"phone={self.phone}}}"
        )


class ContactBuilder:
    """
    Fluent builder: names up front, optional fields chained in any order.

        contact = (
            ContactBuilder("Moo", "Mee")
            .with_email("moo@something.com")
            .with_phone(888776543)
            .build()
        )
    """

    def __init__(self, first_name: str, last_name: str):
        self.first_name = first_name
        self.last_name = last_name
        self.email: Optional[str] = None
        self.phone: Optional[int] = None

    def with_email(self, email: Optional[str]) -> "ContactBuilder":
        self.email = email
        return self

    def with_phone(self, phone: Optional[int]) -> "ContactBuilder":
        self.phone = phone
        return self

    def build(self) -> Contact:
        return Contact.from_builder(self)
