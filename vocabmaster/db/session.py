"""Engine and session factory for the configured database."""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from vocabmaster.core.config import get_settings

settings = get_settings()

engine = create_engine(settings.database_url, echo=False, future=True)
# Jobs and callers open one session per unit of work: ``with SessionLocal() as session``
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
