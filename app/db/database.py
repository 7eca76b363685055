import logging

from app.db.session import Base, engine


def init_db() -> None:
    """Create the tables for every registered model."""
    logger = logging.getLogger(__name__)

    # Import models so their tables are registered on Base.metadata
    import app.models.resume  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ready at %s", engine.url.render_as_string(hide_password=True))


def close_db() -> None:
    engine.dispose()
