import logging

from sqlalchemy.exc import SQLAlchemyError

from gym_management.extensions import db

logger = logging.getLogger(__name__)


def commit():
    """Commit the current session, rolling back if the database refuses."""
    try:
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error("Database commit failed: %s", e)
        raise
