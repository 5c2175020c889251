from typing import Any, Optional
from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class OllamaSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )
    base_url: str = Field(default="http://localhost:11434", alias="OLLAMA_BASE_URL")
    default_model: str = Field(default="mistral", alias="OLLAMA_DEFAULT_MODEL")
    temperature: float = Field(default=0.3, alias="OLLAMA_TEMPERATURE")
    num_predict: int = Field(default=4096, alias="OLLAMA_NUM_PREDICT")
    # None keeps the request pending until the server answers
    timeout: Optional[float] = Field(default=None, alias="OLLAMA_TIMEOUT")

    @field_validator("timeout", mode="before")
    @classmethod
    def _blank_timeout_is_unset(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class DeckSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )
    dir_name: str = Field(default="FlashcardDecks", alias="DECK_DIR_NAME")
    home: Optional[str] = Field(default=None, alias="DECK_HOME")


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )
    name: str = Field(default="flashdeck", alias="APP_NAME")
    version: str = Field(default="v1", alias="API_VERSION")
    host: str = Field(default="127.0.0.1", alias="APP_HOST")
    port: int = Field(default=9000, alias="APP_PORT")
    mode: str = Field(default="prod", alias="MODE")

    @computed_field
    def is_production(self) -> bool:
        return self.mode != "dev"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    app: AppSettings = Field(default_factory=lambda: AppSettings())
    ollama: OllamaSettings = Field(default_factory=lambda: OllamaSettings())
    decks: DeckSettings = Field(default_factory=lambda: DeckSettings())


settings = Settings()
