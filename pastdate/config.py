from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables and .env file.

    Only the outer surfaces (MCP server, demo runner) read settings. The
    parser itself takes everything it needs through ``ParseOptions``.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Remote hosting: transport and bind address
    mcp_transport: str = "stdio"
    mcp_host: str = "0.0.0.0"
    mcp_port: int = 8000

    # Parser behaviour for tool calls
    ignore_case: bool = True
    trace_parser: bool = False

    # Paths & logging: default is <project_root>/data so it works
    # regardless of the process working directory.
    data_dir: Path = Path(__file__).resolve().parent.parent / "data"
    log_level: str = "INFO"


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the cached Settings singleton. Created on first call."""
    global _settings  # noqa: PLW0603
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Clear the cached settings. Used in tests."""
    global _settings  # noqa: PLW0603
    _settings = None
