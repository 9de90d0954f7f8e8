from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_NAME: str = "smart-ping-api"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    API_PREFIX: str = "/api"
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    CORS_ORIGINS: list[str] = ["*"]

    MONGODB_URI: str = "mongodb://localhost:27017"
    MONGODB_DB: str = "smart-ping"

    OPENROUTER_BASE_URL: str = "https://openrouter.ai/api/v1"
    OPENROUTER_API_KEY: str | None = None
    OPENROUTER_MODEL: str = "qwen/qwen3-235b-a22b-07-25:free"
    OPENROUTER_SITE_URL: str = "https://smart-ping-app.com"
    OPENROUTER_APP_TITLE: str = "Smart Ping"

    DEFAULT_PAGE_LIMIT: int = 20
    SUMMARY_WINDOW_HOURS: int = 24

settings = Settings()
