from .i_contact_repository import IContactRepository

__all__ = [
    "IContactRepository",
]
