import sys
import logging
from typing import Any

from loguru import logger

from src.config.settings import settings

SENSITIVE_KEYS = ["key", "token", "password", "secret"]


def mask_secret(value: str) -> str:
    """Keeps the first and last four characters of long secrets."""
    if len(value) > 8:
        return value[:4] + "****" + value[-4:]
    return "********"


def sensitive_data_filter(record: dict[str, Any]) -> bool:
    """Filter function to mask sensitive data in log records."""

    # Mask values bound under sensitive-looking names, e.g. logger.bind(api_key=...)
    extra = record.get("extra")
    if isinstance(extra, dict):
        for extra_key, value in extra.items():
            if any(sk in extra_key.lower() for sk in SENSITIVE_KEYS):
                extra[extra_key] = (
                    mask_secret(value) if isinstance(value, str) else "********"
                )

    # The Supabase key must never reach a sink verbatim
    if settings.supabase_key and settings.supabase_key in record["message"]:
        record["message"] = record["message"].replace(
            settings.supabase_key, "********"
        )

    return True  # Keep the record after filtering/masking


class InterceptHandler(logging.Handler):
    """Routes standard logging records (httpx, postgrest) into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        # Get corresponding Loguru level if it exists
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where originated the logged message
        frame, depth = logging.currentframe(), 2
        while frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def setup_logging() -> None:
    """Configures Loguru logger based on application settings."""
    logger.remove()  # Remove default handler

    logger.add(
        sys.stderr,
        level=settings.log_level.upper(),
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        ),
        colorize=True,
        backtrace=True,
        diagnose=True,
        filter=sensitive_data_filter,
    )

    logger.info(f"Logging initialized with level: {settings.log_level}")

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    logger.info("Standard logging intercepted.")
