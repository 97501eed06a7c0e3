from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Atlantic Lottery winning-numbers API
    ALC_API_BASE: str = "https://dsc.alc.ca/api/winning_numbers"
    # httpx default; the upstream has no explicit deadline of its own
    UPSTREAM_TIMEOUT: float = 5.0

    HOST: str = "0.0.0.0"
    PORT: int = 3001
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
