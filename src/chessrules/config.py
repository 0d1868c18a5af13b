"""Front-end configuration.

Settings come from environment variables prefixed ``CHESSRULES_`` or from a
``.env.chessrules`` file in the working directory; command-line flags
override them. The rules engine itself has nothing to configure.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CHESSRULES_",
        env_file=".env.chessrules",
        env_file_encoding="utf-8",
    )

    # Rendering
    history_rounds: int = Field(default=5, ge=1)
    unicode_pieces: bool = False
    clear_screen: bool = True

    # Logging
    log_level: LogLevel = "WARNING"
