import logging
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings
from rich import print

from blog_globals.core.interfaces.logging import LoggingPort

# using pydantic_settings to manage environment variables
# and do automatic type casting in a central place.
# The site identity variables (BLOG_NAME, ...) are not settings: they are
# read raw through an EnvironmentPort so they can be percent-decoded.
# The ./.env read here only feeds these settings. Identity variables in a
# .env file are used only when BLOG_ENV_FILE points at that file.
class BlogSettings(BaseSettings):
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
        "extra": "ignore"
    }
    BLOG_LOG_LEVEL: str = "INFO"
    # Optional .env file layered under the process environment
    BLOG_ENV_FILE: Path | None = None
    BLOG_PRINT_SETTINGS: bool = False

    def print_settings(self, logger: LoggingPort):
        """Prints the settings for debugging purposes"""
        logger.info("Blog globals settings:")
        print(self)

    @field_validator("BLOG_LOG_LEVEL", mode="before")
    def normalize_log_level(cls, value: str) -> str:
        """Upper-case the level name and reject unknown levels."""
        level = str(value).upper().strip()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return level


class NoOpLogger(LoggingPort):
    def info(self, msg: str, *args):
        pass

    def warning(self, msg: str, *args):
        pass

    def error(self, msg: str, *args):
        pass

    def debug(self, msg: str, *args):
        pass


app_settings = BlogSettings()

# Replaced by the composition root once logging is configured
logger: LoggingPort = NoOpLogger()


def set_logger(new_logger: LoggingPort) -> None:
    global logger
    logger = new_logger


def get_logger() -> LoggingPort:
    return logger
