from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = "INFO"

    onfido_token: str = ""
    onfido_endpoint: str = "https://api.onfido.com/v2/"
    onfido_timeout_seconds: int = 30
    onfido_user_agent: str = "onfido-python/0.1.0"
