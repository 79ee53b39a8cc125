"""
Configuration management for the Business Card Parser.

Handles environment variables and application settings.
"""

import os
import logging
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)


class Config:
    """Application configuration class.

    Attributes:
        DEBUG: Enable debug mode
        TESTING: Enable testing mode
        SECRET_KEY: Flask secret key
        MAX_CONTENT_LENGTH: Maximum upload size (1MB default)
        ALLOWED_EXTENSIONS: Allowed document file extensions
        PARSER_TYPE: Registered parser implementation to instantiate
        SPACY_MODEL: spaCy model package used by the default parser
    """

    # Flask Settings
    DEBUG: bool = os.getenv("CARD_PARSER_DEBUG", "False").lower() == "true"
    TESTING: bool = os.getenv("CARD_PARSER_TESTING", "False").lower() == "true"
    SECRET_KEY: str = os.getenv("CARD_PARSER_SECRET_KEY", "dev-secret-key-change-in-production")

    # Upload Settings
    MAX_CONTENT_LENGTH: int = 1024 * 1024  # 1MB max document size
    ALLOWED_EXTENSIONS: set = {"txt"}

    # Parser Settings
    PARSER_TYPE: str = os.getenv("CARD_PARSER_TYPE") or "default"
    SPACY_MODEL: str = os.getenv("CARD_PARSER_SPACY_MODEL", "en_core_web_sm")

    # Logging
    LOG_LEVEL: str = os.getenv("CARD_PARSER_LOG_LEVEL", "INFO")
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @classmethod
    def init_app(cls, app) -> None:
        """Initialize Flask app with configuration.

        Args:
            app: Flask application instance
        """
        app.config.from_object(cls)
        cls.configure_logging()

        logger.info("Configuration initialized successfully")

    @classmethod
    def configure_logging(cls) -> None:
        """Configure root logging from LOG_LEVEL and LOG_FORMAT."""
        logging.basicConfig(
            level=getattr(logging, cls.LOG_LEVEL.upper(), logging.INFO),
            format=cls.LOG_FORMAT
        )

    @classmethod
    def is_allowed_file(cls, filename: str) -> bool:
        """Check if file extension is allowed.

        Args:
            filename: Name of the file to check

        Returns:
            True if file extension is allowed, False otherwise
        """
        return "." in filename and \
            filename.rsplit(".", 1)[1].lower() in cls.ALLOWED_EXTENSIONS

    @classmethod
    def parser_options(cls) -> dict:
        """Keyword arguments passed to the parser factory."""
        return {"spacy_model": cls.SPACY_MODEL}


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    LOG_LEVEL = "DEBUG"


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False
    LOG_LEVEL = "INFO"


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    LOG_LEVEL = "DEBUG"


# Configuration mapping
config_by_name = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
    "default": DevelopmentConfig
}


def get_config(config_name: Optional[str] = None) -> Config:
    """Get configuration class by name.

    Args:
        config_name: Configuration name (development, production, testing)

    Returns:
        Configuration class
    """
    if config_name is None:
        config_name = os.getenv("CARD_PARSER_ENV", "development")
    return config_by_name.get(config_name, DevelopmentConfig)
