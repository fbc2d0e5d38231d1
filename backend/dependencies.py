"""
Dependency injection providers for FastAPI.

Each request gets one Session from get_db. FastAPI caches that dependency for
the duration of the request, so every repository and the unit of work built
below share it, and one commit covers all of their staged changes.
"""

from typing import Iterator

from sqlalchemy.orm import Session
from fastapi import Depends

from database import get_db
from repositories.identity_account_repository import IdentityAccountRepository
from repositories.packing_list_repository import PackingListRepository
from repositories.unit_of_work import SqlAlchemyUnitOfWork
from repositories.user_repository import UserRepository
from services.packing_list_service import PackingListService
from services.registration_service import RegistrationService
from services.user_service import UserService


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    """
    Factory function for creating UserRepository instances.

    Args:
        db: Database session (injected)

    Returns:
        UserRepository instance
    """
    return UserRepository(db)


def get_packing_list_repository(db: Session = Depends(get_db)) -> PackingListRepository:
    return PackingListRepository(db)


def get_identity_account_repository(db: Session = Depends(get_db)) -> IdentityAccountRepository:
    return IdentityAccountRepository(db)


def get_unit_of_work(db: Session = Depends(get_db)) -> Iterator[SqlAlchemyUnitOfWork]:
    """
    Provide the request's unit of work.

    Detaches its session listener when the request finishes.
    """
    unit_of_work = SqlAlchemyUnitOfWork(db)
    try:
        yield unit_of_work
    finally:
        unit_of_work.close()


def get_user_service(
    user_repository: UserRepository = Depends(get_user_repository),
    unit_of_work: SqlAlchemyUnitOfWork = Depends(get_unit_of_work),
) -> UserService:
    return UserService(user_repository, unit_of_work)


def get_registration_service(
    identity_accounts: IdentityAccountRepository = Depends(get_identity_account_repository),
    user_repository: UserRepository = Depends(get_user_repository),
    unit_of_work: SqlAlchemyUnitOfWork = Depends(get_unit_of_work),
) -> RegistrationService:
    """
    Factory function for creating RegistrationService instances.

    Returns:
        RegistrationService whose repositories and unit of work share one session
    """
    return RegistrationService(identity_accounts, user_repository, unit_of_work)


def get_packing_list_service(
    packing_lists: PackingListRepository = Depends(get_packing_list_repository),
    unit_of_work: SqlAlchemyUnitOfWork = Depends(get_unit_of_work),
) -> PackingListService:
    return PackingListService(packing_lists, unit_of_work)
