from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CSVSCOPE_STORAGE__",
        env_file=".env",
        extra="ignore",
    )

    path: Path = Path(__file__).resolve().parent.parent / "analyses.json"


class TokenizerConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CSVSCOPE_TOKENIZER__",
        env_file=".env",
        extra="ignore",
    )

    # GPT-4 / GPT-3.5-turbo vocabulary
    encoding: str = "cl100k_base"


class ValidationConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CSVSCOPE_VALIDATION__",
        env_file=".env",
        extra="ignore",
    )

    disallowed_substrings: list[str] = Field(default_factory=lambda: ["Sonny Hayes"])


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="CSVSCOPE_", env_file=".env", extra="ignore")

    log_level: str = "INFO"
    storage: StorageConfig = StorageConfig()
    tokenizer: TokenizerConfig = TokenizerConfig()
    validation: ValidationConfig = ValidationConfig()


settings = Settings()
