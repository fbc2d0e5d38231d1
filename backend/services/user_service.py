"""
User Service

Use cases for reading and maintaining domain users. Domain validation
failures and commit failures are wrapped into user-specific errors; the
original exception stays available as __cause__.
"""

import logging
import uuid
from typing import List, Optional

from domain.entities.user import User
from domain.exceptions import EmptyEmailError, InvalidEmailError
from domain.repositories import IUserRepository
from dtos.request.user_request import CreateUserRequest, UpdateUserRequest
from dtos.response.user_response import UserResponse
from exceptions import PersistenceError, UserCreationFailedError, UserUpdateFailedError
from services.interfaces import IUnitOfWork
from utils.logging_utils import log_operation

logger = logging.getLogger(__name__)


class UserService:
    """Service for user-related use cases."""

    def __init__(self, user_repository: IUserRepository, unit_of_work: IUnitOfWork):
        """
        Initialize UserService.

        Args:
            user_repository: Repository sharing the unit of work's session
            unit_of_work: Commit boundary for this use case
        """
        self.user_repository = user_repository
        self.unit_of_work = unit_of_work

    def get_user_by_id(self, user_id: uuid.UUID) -> Optional[UserResponse]:
        user = self.user_repository.get_by_id(user_id)
        return UserResponse.from_domain(user) if user else None

    def get_all_users(self) -> List[UserResponse]:
        return [UserResponse.from_domain(user) for user in self.user_repository.get_all()]

    @log_operation("add_user")
    def add_user(self, request: CreateUserRequest) -> UserResponse:
        """
        Create and store a new user.

        Raises:
            UserCreationFailedError: If the email is invalid or the commit fails
        """
        try:
            user = User.create(request.email)
            self.user_repository.add(user)
            self.unit_of_work.commit()
        except (EmptyEmailError, InvalidEmailError) as e:
            raise UserCreationFailedError("User creation failed due to invalid input.") from e
        except PersistenceError as e:
            raise UserCreationFailedError("An unexpected error occurred while creating the user.") from e

        return UserResponse.from_domain(user)

    @log_operation("update_user")
    def update_user(self, request: UpdateUserRequest) -> UserResponse:
        """
        Change the email of an existing user.

        Raises:
            UserUpdateFailedError: If the user is missing, the email is invalid
                or the commit fails
        """
        user = self.user_repository.get_by_id(request.id)
        if user is None:
            raise UserUpdateFailedError(f"User with ID '{request.id}' not found.")

        try:
            user.change_email(request.email)
            self.user_repository.update(user)
            self.unit_of_work.commit()
        except (EmptyEmailError, InvalidEmailError) as e:
            raise UserUpdateFailedError("User update failed due to invalid input.") from e
        except PersistenceError as e:
            raise UserUpdateFailedError("An unexpected error occurred while updating the user.") from e

        return UserResponse.from_domain(user)

    @log_operation("delete_user")
    def delete_user(self, user_id: uuid.UUID) -> None:
        """Delete a user; unknown ids are ignored."""
        self.user_repository.delete(user_id)
        self.unit_of_work.commit()
