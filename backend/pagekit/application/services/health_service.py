from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from pagekit.infrastructure.logging import get_logger

logger = get_logger(__name__)


def get_health_status(db: Session) -> dict:
    db_connected = False
    try:
        db.execute(text("SELECT 1"))
        db_connected = True
    except SQLAlchemyError as exc:
        logger.warning("db_unreachable", error=str(exc))

    return {"message": "pagekit is running", "db_connected": db_connected}
