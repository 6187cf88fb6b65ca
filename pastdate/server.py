import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from fastmcp import FastMCP

logger = logging.getLogger(__name__)

mcp = FastMCP("pastdate")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(log_level: str, data_dir: Path | None = None) -> None:
    """Send pastdate logs to stderr and, for the server, to a rotating file.

    Args:
        log_level: Logging level name; unknown names fall back to INFO.
        data_dir: Where the server keeps ``logs/pastdate.log``. ``None``
            (the demo runner) logs to the console only.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    handlers: list[logging.Handler] = []
    # FileHandler is a StreamHandler subclass, hence the exact type check
    if not any(type(h) is logging.StreamHandler for h in root_logger.handlers):
        handlers.append(logging.StreamHandler())

    if data_dir is not None and not any(
        isinstance(h, RotatingFileHandler) for h in root_logger.handlers
    ):
        log_dir = data_dir / "logs"
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(log_dir / "pastdate.log", maxBytes=1024 * 1024, backupCount=2)
        )

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)


def initialize() -> FastMCP:
    """Set up directories, logging, and register tools. Returns the MCP server."""
    from pastdate.config import get_settings

    settings = get_settings()

    settings.data_dir.mkdir(parents=True, exist_ok=True)
    setup_logging(settings.log_level, settings.data_dir)

    from pastdate.tools.dates import register_date_tools

    register_date_tools(mcp)

    logger.info("pastdate MCP server initialized")
    return mcp
