from .contact import Contact, ContactBuilder

__all__ = [
    "Contact",
    "ContactBuilder",
]
