import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from skugen.schemas import AppSettings

logger = logging.getLogger(__name__)

ROOT_DIR = Path(__file__).parent

DEFAULT_LOG_LEVEL = "INFO"


def load_environment(env_path: Optional[Path] = None) -> bool:
    """
    Load a .env file into the process environment.

    Args:
        env_path: Explicit file to load. When omitted the package directory
            is tried first, then its parent, then the working directory.

    Returns:
        True if a file was found and loaded
    """
    if env_path is not None:
        if not env_path.exists():
            logger.warning(f".env file not found at {env_path}")
            return False
        return load_dotenv(env_path, override=True)

    for candidate in (ROOT_DIR / ".env", ROOT_DIR.parent / ".env"):
        if candidate.exists():
            logger.info(f"Loaded .env file from: {candidate}")
            return load_dotenv(candidate, override=True)

    return load_dotenv(override=True)


def load_default_settings() -> AppSettings:
    """Build AppSettings from SKU_DELIMITER / SKU_PREFIX / SKU_SUFFIX."""
    defaults = AppSettings()
    # An empty delimiter is meaningful (plain concatenation), so only unset falls back
    delimiter = os.environ.get("SKU_DELIMITER")
    return AppSettings(
        delimiter=defaults.delimiter if delimiter is None else delimiter,
        prefix=os.environ.get("SKU_PREFIX", ""),
        suffix=os.environ.get("SKU_SUFFIX", ""),
    )


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging for applications embedding the engine."""
    level_name = (level or os.environ.get("SKUGEN_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
    numeric = getattr(logging, level_name, None)
    if not isinstance(numeric, int):
        logger.warning(f"Unknown log level {level_name}, using {DEFAULT_LOG_LEVEL}")
        numeric = logging.INFO
    logging.basicConfig(level=numeric)
