import logging

from flask import Flask
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from .config import settings
from .logging_config import setup_logging


def create_app(test_config=None):
    app = Flask(__name__)

    # Load configuration from settings
    app.config.from_mapping(
        SECRET_KEY=settings.SECRET_KEY,
        DEBUG=settings.DEBUG,
        DATABASE_URL=settings.DATABASE_URL,
        LOG_LEVEL=settings.LOG_LEVEL,
        LOG_FILE=settings.LOG_FILE,
    )

    if test_config:
        app.config.update(test_config)

    setup_logging(app.config["LOG_LEVEL"], app.config["LOG_FILE"] or None)

    db_uri = app.config["DATABASE_URL"]

    # Configure engine based on database type
    if db_uri.startswith("postgresql"):
        engine = create_engine(
            db_uri,
            pool_size=10,
            max_overflow=20,
            pool_pre_ping=True,
            pool_recycle=3600,
            echo=app.config["DEBUG"]  # Log SQL queries in debug mode
        )
    elif db_uri in ("sqlite://", "sqlite:///:memory:"):
        # A single shared connection keeps the in-memory database alive
        engine = create_engine(
            db_uri,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    elif db_uri.startswith("sqlite"):
        engine = create_engine(
            db_uri,
            connect_args={"check_same_thread": False},
            echo=app.config["DEBUG"]
        )
    else:
        engine = create_engine(db_uri, pool_pre_ping=True, echo=app.config["DEBUG"])

    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    # attach to app for other modules to use
    app.extensions["db_engine"] = engine
    app.extensions["db_session_factory"] = SessionLocal

    from .routes import player_bp

    app.register_blueprint(player_bp)

    # helper to create DB tables based on SQLAlchemy models
    def init_db():
        try:
            from .models import Base

            Base.metadata.create_all(bind=engine)
        except Exception as e:
            logging.exception("init_db failed: %s", e)
            # re-raise so callers (tests) can handle or log as needed
            raise

    app.init_db = init_db

    return app
