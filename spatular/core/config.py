# spatular/core/config.py

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    ENV: str = "local"

    SERVICE_NAME: str = "spatular"
    LOG_LEVEL: str = "INFO"

    DEFAULT_LANGUAGE: str = "en"
    THAI_DICTIONARY_PATH: str | None = None  # word list loaded at startup
    STOPWORD_SOURCE: str = "json"  # "json" (bundled lists) | "nltk"
    STOPWORDS_DIR: str | None = None  # overrides the bundled JSON lists

    MAX_TEXT_LENGTH: int = 100_000
    MAX_NGRAM_SIZE: int = 10

    FRONTEND_ORIGIN: str | None = None  # PRODUCTION MODE ONLY
    RATE_LIMIT: str = "120/minute"

    model_config = SettingsConfigDict(
        env_prefix="SPATULAR_",
        env_file=None,
        env_file_encoding="utf-8",
    )


settings = Settings()
