# backoffice/config.py
import yaml
import os
from dotenv import load_dotenv
import logging
import sys
from typing import Dict, Any

load_dotenv(override=True)

# ENV VARIABLES
MONGODB_URI = os.getenv("MONGODB_URI", "").strip()
MONGODB_DATABASE = os.getenv("MONGODB_DATABASE", "").strip()

BACKOFFICE_PASSWORD = os.getenv("BACKOFFICE_PASSWORD", "").strip()
BACKOFFICE_HOST = os.getenv("BACKOFFICE_HOST", "0.0.0.0").strip()
BACKOFFICE_PORT = int(os.getenv("BACKOFFICE_PORT", 4000))

GRIDFS_BUCKET = os.getenv("GRIDFS_BUCKET", "cvs").strip()

CORS_ALLOWED_ORIGINS = [
    origin.strip() for origin in os.getenv("CORS_ALLOWED_ORIGINS", "*").split(",")
]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper()

DEFAULT_DATABASE_NAME = "vynehr"


def configure_logging(level=logging.INFO):
    """Configure logging for the entire application."""
    # Check if already configured to avoid duplicate handlers
    if not logging.getLogger().hasHandlers():
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)

        root_logger = logging.getLogger()
        root_logger.setLevel(level)
        root_logger.addHandler(console_handler)


class Config:
    """Optional YAML settings layered on top of the environment."""

    def __init__(self, config_path: str = "config.yaml"):
        self.config: Dict[str, Any] = {}
        if os.path.exists(config_path):
            with open(config_path, "r") as file:
                self.config = yaml.safe_load(file) or {}

    def get(self, *keys, default=None):
        """Generalized method to get a value from a nested dictionary."""
        value = self.config
        try:
            for key in keys:
                value = value[key]
            return value
        except (KeyError, TypeError):
            return default

    def get_pool_options(self) -> Dict[str, Any]:
        """Connection pool options for the motor client, YAML overrides applied."""
        options = {
            "maxPoolSize": 10,
            "minPoolSize": 2,
            "maxIdleTimeMS": 30000,
            "serverSelectionTimeoutMS": 30000,
            "socketTimeoutMS": 45000,
            "connectTimeoutMS": 30000,
            "retryWrites": True,
            "retryReads": True,
        }
        options.update(self.get("mongo", "pool", default={}) or {})
        return options

    def get_gridfs_bucket(self) -> str:
        return self.get("gridfs", "bucket", default=GRIDFS_BUCKET)


# Expose a module-level config instance for convenient imports
# Allow overriding the config file location via BACKOFFICE_CONFIG_PATH
CONFIG_PATH = os.getenv("BACKOFFICE_CONFIG_PATH", "config.yaml")
config = Config(CONFIG_PATH)
