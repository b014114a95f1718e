from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    OPENAI_API_KEY: str | None = None
    OPENAI_MODEL_REPLY: str = "gpt-4o-mini"
    OPENAI_TEMPERATURE_REPLY: float = 0.7
    OPENAI_MAX_TOKENS_REPLY: int = 1024

    # "auto" picks openai when OPENAI_API_KEY is set, mock otherwise
    CHAT_RESPONDER: str = "auto"
    TOOL_MAX_ITERATIONS: int = 5

    BUSINESS_NAME: str = "Clínica de Beleza e Bem-Estar"
    BUSINESS_TIMEZONE: str = "America/Sao_Paulo"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    SESSION_TIMEOUT_SECONDS: int = 30 * 60
    SESSION_SWEEP_INTERVAL_SECONDS: int = 5 * 60
    SESSION_HISTORY_LIMIT: int = 10

    AVAILABILITY_DAYS_AHEAD: int = 7
    AVAILABILITY_SEED: int | None = None


settings = Settings()
