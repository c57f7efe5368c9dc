"""Runtime configuration for the dex, read from the environment and .env."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Dex settings.

    Environment variables win over the .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # 도감(bestiary) 확장 필드 보관 여부
    BESTIARY_ENABLED: bool = False

    # 시작 시 표준 18타입 상성표 로드
    SEED_TYPE_CHART: bool = True


settings = Settings()
