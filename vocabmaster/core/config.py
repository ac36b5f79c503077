from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    app_name: str = "VocabMaster"
    app_version: str = "0.1.0"

    database_scheme: str = "postgresql+psycopg"
    database_host: str = "localhost"
    database_port: int = 5432
    database_user: str = "vocab_admin"
    database_password: str = "vocab_password"
    database_name: str = "vocabmaster"

    # Dictionary Provider Configuration
    dictionary_api_url: str = "https://api.dictionaryapi.dev/api/v2/entries/en"

    # Translation Provider Configuration
    translation_primary_provider: str = "google"
    translation_fallback_provider: str = "static"
    translation_source_language: str = "en"
    translation_target_language: str = "vi"
    google_translate_url: str = "https://translate.googleapis.com/translate_a/single"
    libretranslate_url: str = "https://libretranslate.com/translate"
    libretranslate_api_key: str = ""

    # Outbound HTTP
    http_timeout_seconds: float = 30.0
    bulk_request_delay_seconds: float = 1.0  # pause between API calls in bulk jobs

    # Word Selection Configuration
    learned_words_cache_ttl_seconds: int = 900  # 15 minutes
    selector_max_attempts: int = 5
    random_seed: int | None = None  # fixed seed for reproducible sampling

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="VOCAB_",
        extra="ignore",
    )

    @property
    def database_url(self) -> str:
        """Assemble a SQLAlchemy compatible database URL."""
        return (
            f"{self.database_scheme}://{self.database_user}:{self.database_password}"
            f"@{self.database_host}:{self.database_port}/{self.database_name}"
        )


@lru_cache
def get_settings() -> Settings:
    """Cache settings to avoid re-parsing environment files."""
    return Settings()
