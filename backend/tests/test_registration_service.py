import uuid

import pytest

from domain.exceptions import InvalidEmailError
from dtos.request.user_request import RegisterUserRequest
from exceptions import PersistenceError, RegistrationFailedError
from repositories.identity_account_repository import IdentityAccountRepository, normalize_email
from repositories.unit_of_work import SqlAlchemyUnitOfWork
from repositories.user_repository import UserRepository
from services.registration_service import RegistrationService


@pytest.fixture
def service(db_session):
    with SqlAlchemyUnitOfWork(db_session) as uow:
        yield RegistrationService(IdentityAccountRepository(db_session), UserRepository(db_session), uow)


def test_register_stores_identity_account_and_user(service, fresh_session):
    registered = service.register(RegisterUserRequest(email="john@test.com"))

    session = fresh_session()
    assert UserRepository(session).get_by_id(registered.id).email.value == "john@test.com"
    assert IdentityAccountRepository(session).find_id_by_email("john@test.com") == registered.id


def test_register_rejects_invalid_email_without_writing(service, db_session):
    with pytest.raises(RegistrationFailedError) as exc_info:
        service.register(RegisterUserRequest(email="john"))

    assert isinstance(exc_info.value.__cause__, InvalidEmailError)
    assert UserRepository(db_session).count() == 0
    assert IdentityAccountRepository(db_session).count() == 0


def test_register_rejects_known_email(service):
    service.register(RegisterUserRequest(email="john@test.com"))

    with pytest.raises(RegistrationFailedError) as exc_info:
        service.register(RegisterUserRequest(email="JOHN@test.com"))

    assert exc_info.value.message == "The email 'JOHN@test.com' is already registered."
    assert exc_info.value.details == {"email": "JOHN@test.com"}
    assert exc_info.value.__cause__ is None


def test_failed_commit_leaves_neither_record(service, db_session, fresh_session, monkeypatch):
    first = service.register(RegisterUserRequest(email="john@test.com"))
    # Simulate a concurrent registration slipping past the lookup
    monkeypatch.setattr(service.identity_accounts, "find_id_by_email", lambda email: None)

    with pytest.raises(RegistrationFailedError) as exc_info:
        service.register(RegisterUserRequest(email="JOHN@test.com"))

    assert isinstance(exc_info.value.__cause__, PersistenceError)
    session = fresh_session()
    assert UserRepository(session).count() == 1
    assert IdentityAccountRepository(session).count() == 1
    assert UserRepository(session).get_by_id(first.id) is not None


def test_normalize_email():
    assert normalize_email("  John@Test.com ") == "JOHN@TEST.COM"


def test_identity_accounts_find_and_delete(db_session):
    accounts = IdentityAccountRepository(db_session)
    account_id = uuid.uuid4()

    accounts.add(account_id, "Jane@Test.com")
    db_session.commit()

    assert accounts.find_id_by_email(" jane@test.COM ") == account_id
    assert accounts.find_id_by_email("other@test.com") is None

    accounts.delete(account_id)
    accounts.delete(uuid.uuid4())
    db_session.commit()

    assert accounts.find_id_by_email("jane@test.com") is None
