import uuid

import pytest

from domain.aggregates.packing_list import PackingList
from domain.entities.user import User
from exceptions import ApplicationError, PersistenceError
from models import ItemRecord
from repositories.identity_account_repository import IdentityAccountRepository
from repositories.packing_list_repository import PackingListRepository
from repositories.unit_of_work import SqlAlchemyUnitOfWork
from repositories.user_repository import UserRepository


@pytest.fixture
def unit_of_work(db_session):
    uow = SqlAlchemyUnitOfWork(db_session)
    yield uow
    uow.close()


def test_commit_returns_number_of_affected_rows(db_session, unit_of_work):
    packing_lists = PackingListRepository(db_session)
    packing_list = PackingList.create("Trip", uuid.uuid4())
    packing_list.add_item("Hat")
    packing_list.add_item("Map")

    packing_lists.add(packing_list)

    assert unit_of_work.commit() == 3


def test_commit_counts_inserts_updates_and_deletes(db_session, unit_of_work):
    packing_lists = PackingListRepository(db_session)
    packing_list = PackingList.create("Trip", uuid.uuid4())
    hat = packing_list.add_item("Hat")
    map_item = packing_list.add_item("Map")
    packing_lists.add(packing_list)
    unit_of_work.commit()

    packing_list.change_item_name(hat.id, "Sun Hat")
    packing_list.remove_item(map_item.id)
    packing_list.add_item("Shoes")
    packing_lists.update(packing_list)

    assert unit_of_work.commit() == 3


def test_commit_spans_several_repositories(db_session, unit_of_work, fresh_session):
    users = UserRepository(db_session)
    packing_lists = PackingListRepository(db_session)
    user = User.create("john@test.com")
    packing_list = PackingList.create("Trip", user.id)

    users.add(user)
    packing_lists.add(packing_list)
    unit_of_work.commit()

    session = fresh_session()
    assert UserRepository(session).get_by_id(user.id) is not None
    assert PackingListRepository(session).get_by_id(packing_list.id) is not None


def test_failed_commit_discards_every_staged_change(db_session, unit_of_work, fresh_session):
    users = UserRepository(db_session)
    user = User.create("john@test.com")
    users.add(user)
    # Item row pointing at a packing list that does not exist
    db_session.add(ItemRecord(id=str(uuid.uuid4()), name="Orphan", packing_list_id=str(uuid.uuid4())))

    with pytest.raises(PersistenceError) as exc_info:
        unit_of_work.commit()

    assert exc_info.value.details == {"operation": "commit"}
    assert exc_info.value.__cause__ is not None
    assert isinstance(exc_info.value, ApplicationError)
    assert UserRepository(fresh_session()).get_by_id(user.id) is None
    assert users.get_by_id(user.id) is None


def test_duplicate_identity_email_fails_commit_and_keeps_user_out(db_session, unit_of_work, fresh_session):
    accounts = IdentityAccountRepository(db_session)
    users = UserRepository(db_session)
    existing = User.create("taken@test.com")
    accounts.add(existing.id, existing.email.value)
    users.add(existing)
    unit_of_work.commit()

    newcomer = User.create("TAKEN@test.com")
    users.add(newcomer)
    accounts.add(newcomer.id, newcomer.email.value)

    with pytest.raises(PersistenceError):
        unit_of_work.commit()

    session = fresh_session()
    assert UserRepository(session).get_by_id(newcomer.id) is None
    assert UserRepository(session).get_by_id(existing.id) is not None


def test_session_is_usable_after_failed_commit(db_session, unit_of_work):
    db_session.add(ItemRecord(id=str(uuid.uuid4()), name="Orphan", packing_list_id=str(uuid.uuid4())))
    with pytest.raises(PersistenceError):
        unit_of_work.commit()

    users = UserRepository(db_session)
    user = User.create("after@test.com")
    users.add(user)

    assert unit_of_work.commit() == 1
    assert users.get_by_id(user.id) is not None


def test_rollback_discards_pending_changes(db_session, unit_of_work, fresh_session):
    users = UserRepository(db_session)
    user = User.create("john@test.com")
    users.add(user)

    unit_of_work.rollback()

    assert unit_of_work.commit() == 0
    assert UserRepository(fresh_session()).get_by_id(user.id) is None


def test_context_manager_rolls_back_on_error(db_session, fresh_session):
    user = User.create("john@test.com")

    with pytest.raises(RuntimeError):
        with SqlAlchemyUnitOfWork(db_session):
            UserRepository(db_session).add(user)
            raise RuntimeError("boom")

    assert UserRepository(fresh_session()).get_by_id(user.id) is None


def test_close_stops_counting(db_session):
    uow = SqlAlchemyUnitOfWork(db_session)
    uow.close()
    uow.close()

    UserRepository(db_session).add(User.create("john@test.com"))

    assert uow.commit() == 0
