from sqlmodel import SQLModel, Session, create_engine

from app.config import DATABASE_URL, DATABASE_ECHO

connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}
engine = create_engine(DATABASE_URL, echo=DATABASE_ECHO, connect_args=connect_args)


def init_db():
    """Creates the feedback table if it does not exist yet."""
    # Importing the model registers its table on SQLModel.metadata
    from app.models import feedback  # noqa: F401

    SQLModel.metadata.create_all(engine)


def get_session():
    """FastAPI dependency: one session per request, closed afterwards."""
    with Session(engine) as session:
        yield session
