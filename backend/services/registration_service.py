"""
Registration Service

Registers a new user: one identity account row for authentication and one
domain user row, both keyed by the same id and committed together.
"""

import logging

from domain.entities.user import User
from domain.exceptions import EmptyEmailError, InvalidEmailError
from domain.repositories import IUserRepository
from dtos.request.user_request import RegisterUserRequest
from dtos.response.user_response import UserResponse
from exceptions import PersistenceError, RegistrationFailedError
from services.interfaces import IIdentityAccountStore, IUnitOfWork
from utils.logging_utils import log_operation

logger = logging.getLogger(__name__)


class RegistrationService:
    """Service for the registration use case."""

    def __init__(
        self,
        identity_accounts: IIdentityAccountStore,
        user_repository: IUserRepository,
        unit_of_work: IUnitOfWork,
    ):
        self.identity_accounts = identity_accounts
        self.user_repository = user_repository
        self.unit_of_work = unit_of_work

    @log_operation("register_user")
    def register(self, request: RegisterUserRequest) -> UserResponse:
        """
        Create the identity account and the domain user in one commit.

        Raises:
            RegistrationFailedError: If the email is invalid or already
                registered, or the commit fails. Neither row is stored.
        """
        try:
            user = User.create(request.email)
        except (EmptyEmailError, InvalidEmailError) as e:
            raise RegistrationFailedError(request.email, "Registration failed due to invalid input.") from e

        if self.identity_accounts.find_id_by_email(request.email) is not None:
            raise RegistrationFailedError(request.email, f"The email '{request.email}' is already registered.")

        self.identity_accounts.add(user.id, user.email.value)
        self.user_repository.add(user)

        try:
            self.unit_of_work.commit()
        except PersistenceError as e:
            raise RegistrationFailedError(request.email, "Registration failed, nothing was stored.") from e

        logger.info(f"Registered user {user.id}")
        return UserResponse.from_domain(user)
