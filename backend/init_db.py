from sqlalchemy.engine import Engine
import logging

from database import engine as default_engine, Base
import models  # noqa: F401  (registers the users and books tables on Base)

logger = logging.getLogger(__name__)


def init_database(engine: Engine | None = None):
    """
    Create the users and books tables if they do not exist yet.

    Args:
        engine: Target engine, defaults to the configured one
    """
    target = engine or default_engine
    Base.metadata.create_all(bind=target)
    logger.info(f"Database ready: {target.url.render_as_string(hide_password=True)}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_database()
