from sqlalchemy import text

from blogboard.infrastructure.db.session import build_engine


def test_sqlite_connections_enforce_foreign_keys_and_case_sensitive_like(tmp_path):
    """
    Validate SQLite connection settings.

    1. Build an engine on a fresh SQLite file.
    2. Read the foreign key pragma on a new connection.
    3. Compare LIKE on differently cased strings.
    4. Validate foreign keys are on and LIKE is case-sensitive.
    """
    engine = build_engine(f"sqlite:///{tmp_path / 'pragmas.db'}")
    try:
        with engine.connect() as connection:
            assert connection.execute(text("PRAGMA foreign_keys")).scalar_one() == 1
            assert connection.execute(text("SELECT 'Python' LIKE 'python'")).scalar_one() == 0
            assert connection.execute(text("SELECT 'Python' LIKE 'Python'")).scalar_one() == 1
    finally:
        engine.dispose()
