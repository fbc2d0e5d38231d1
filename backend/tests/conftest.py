import os
import sys
from pathlib import Path

# Keep the module-level engine away from the real database
os.environ.setdefault("PACKANDGO_DATABASE_URL", "sqlite:///:memory:")

# Add backend directory to Python path FIRST
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

# Now import after path is set
import pytest
from sqlalchemy import event

from database import build_engine, build_session_factory, init_db


@pytest.fixture
def engine(tmp_path):
    """File-backed sqlite database per test, so separate sessions see only committed data"""
    engine = build_engine(f"sqlite:///{tmp_path / 'test.db'}", echo=False)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
def db_session(session_factory):
    """Create a session for the code under test"""
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def fresh_session(session_factory):
    """Open a second session for checking what was actually committed"""
    sessions = []

    def _open():
        session = session_factory()
        sessions.append(session)
        return session

    yield _open
    for session in sessions:
        session.close()


@pytest.fixture
def captured_statements(engine):
    """Record every SQL statement and its parameters executed on the engine"""
    statements = []

    def _capture(conn, cursor, statement, parameters, context, executemany):
        statements.append((statement, parameters))

    event.listen(engine, "before_cursor_execute", _capture)
    yield statements
    event.remove(engine, "before_cursor_execute", _capture)
