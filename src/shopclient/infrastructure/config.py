from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SHOP_", env_file=".env", env_ignore_empty=True, extra="ignore"
    )

    # Backend base URL, e.g. http://localhost:8080
    API_URL: str = "http://localhost:8080"

    # Seconds; unset means requests wait indefinitely
    HTTP_TIMEOUT: float | None = None

    CURRENCY_SYMBOL: str = "₹"
    LOG_LEVEL: str = "WARNING"


settings = Settings()
