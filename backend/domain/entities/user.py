"""
User Entity

A registered person. Holds exactly one Email and owns no children.
"""

import uuid

from domain.entities.base import Entity
from domain.value_objects.email import Email
from utils.uuid_helper import generate_id


class User(Entity):
    """
    User entity.

    Construct with User.create() for new users and User.load() when
    rebuilding from storage. Both validate the email.
    """

    def __init__(self, id: uuid.UUID, email: Email):
        super().__init__(id)
        self._email = email

    @property
    def email(self) -> Email:
        return self._email

    @classmethod
    def create(cls, email: str) -> "User":
        """
        Create a new user with a fresh id.

        Raises:
            EmptyEmailError: If email is None, empty or whitespace
            InvalidEmailError: If email is malformed
        """
        return cls(generate_id(), Email(email))

    @classmethod
    def load(cls, id: uuid.UUID, email: str) -> "User":
        """
        Rebuild a stored user. The stored email is validated again so
        corrupt rows are caught here.
        """
        return cls(id, Email(email))

    def change_email(self, email: str) -> None:
        """Replace the email; the id is untouched."""
        self._email = Email(email)
