"""Create all tables from the model metadata.

Run: python -m blog_api.init_db
"""

import logging

from blog_api.config import get_settings
from blog_api.core.logging_config import setup_logging
from blog_api.database import Database

logger = logging.getLogger(__name__)


def main():
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL)
    db = Database(settings.DATABASE_URL)
    try:
        db.create_all()
        logger.info("Tables created successfully")
    finally:
        db.dispose()


if __name__ == "__main__":
    main()
