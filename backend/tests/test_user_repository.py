import uuid

import pytest

from domain.entities.user import User
from repositories.unit_of_work import SqlAlchemyUnitOfWork
from repositories.user_repository import UserRepository


@pytest.fixture
def repository(db_session):
    return UserRepository(db_session)


@pytest.fixture
def unit_of_work(db_session):
    with SqlAlchemyUnitOfWork(db_session) as uow:
        yield uow


def test_add_then_get_by_id(repository, unit_of_work, fresh_session):
    user = User.create("john.doe@test.com")

    repository.add(user)
    unit_of_work.commit()

    loaded = UserRepository(fresh_session()).get_by_id(user.id)
    assert loaded == user
    assert loaded.email.value == "john.doe@test.com"


def test_add_is_not_durable_without_commit(repository, fresh_session):
    user = User.create("john.doe@test.com")

    repository.add(user)

    assert UserRepository(fresh_session()).get_by_id(user.id) is None


def test_get_by_id_returns_none_for_unknown_id(repository):
    assert repository.get_by_id(uuid.uuid4()) is None


def test_get_all(repository, unit_of_work):
    john = User.create("john@test.com")
    jane = User.create("jane@test.com")
    repository.add(john)
    repository.add(jane)
    unit_of_work.commit()

    users = repository.get_all()

    assert {user.email.value for user in users} == {"john@test.com", "jane@test.com"}
    assert repository.count() == 2


def test_update_changes_email(repository, unit_of_work, fresh_session):
    user = User.create("old@test.com")
    repository.add(user)
    unit_of_work.commit()

    user.change_email("new@test.com")
    repository.update(user)
    unit_of_work.commit()

    assert UserRepository(fresh_session()).get_by_id(user.id).email.value == "new@test.com"


def test_update_unknown_user_is_a_no_op(repository, unit_of_work):
    repository.update(User.create("ghost@test.com"))

    assert unit_of_work.commit() == 0
    assert repository.count() == 0


def test_delete(repository, unit_of_work, fresh_session):
    user = User.create("john@test.com")
    repository.add(user)
    unit_of_work.commit()

    repository.delete(user.id)
    unit_of_work.commit()

    assert UserRepository(fresh_session()).get_by_id(user.id) is None


def test_delete_unknown_user_is_a_no_op(repository, unit_of_work):
    repository.delete(uuid.uuid4())
    assert unit_of_work.commit() == 0


def test_exists(repository, unit_of_work):
    user = User.create("john@test.com")
    repository.add(user)
    unit_of_work.commit()

    assert repository.exists(user.id)
    assert not repository.exists(uuid.uuid4())
