from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_EMOJI_DATA_DIR = Path(__file__).resolve().parent.parent / "data" / "emojis"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "KnowYourEmoji"
    debug: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]

    # AI / Anthropic
    # Empty string = interpreter disabled (requests fail with a config error)
    anthropic_api_key: str = ""
    enable_interpreter: bool = True
    interpreter_model: str = "claude-sonnet-4-20250514"
    interpreter_max_tokens: int = 1000
    interpreter_temperature: float = 0.7
    # Deadline for a single provider call, in seconds
    interpreter_timeout_seconds: float = 30.0

    # Emoji catalog - directory of <slug>.json files, loaded once at startup
    emoji_data_dir: Path = DEFAULT_EMOJI_DATA_DIR

    # Free interpretations per client within a rolling 24h window
    interpret_daily_limit: int = 3

    @property
    def interpreter_configured(self) -> bool:
        """Check if the interpreter can reach the provider (has API key and is enabled)."""
        return bool(self.anthropic_api_key) and self.enable_interpreter


settings = Settings()
