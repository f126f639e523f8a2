# init_db.py
import logging

from store_admin.config import settings
from store_admin.database import engine, SessionLocal, Base
from store_admin.db.models.store import Store
import store_admin.db.models  # noqa: F401  registers every table on Base

logger = logging.getLogger(__name__)

def seed():
    db = SessionLocal()
    try:
        # Seed a store for the development owner
        if not db.query(Store).filter(Store.user_id == settings.dev_user_id).first():
            db.add(Store(name="Default Store", user_id=settings.dev_user_id))
        db.commit()
    finally:
        db.close()

def init():
    Base.metadata.create_all(bind=engine)
    logger.info("Tables created")
    seed()
    logger.info("Seed data added")

if __name__ == "__main__":
    from store_admin.logging_config import setup_logging

    setup_logging(settings.log_level)
    init()
