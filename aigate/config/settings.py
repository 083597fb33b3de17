from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    db_host: str = "host.docker.internal"
    db_port: int = 5432
    db_database: str = "aigate"
    db_username: str = "aigate"
    db_password: str = "secret"
    db_pool_timeout_seconds: float = 30.0

    pdf_engine: str = "pdfplumber"

    llm_provider: str = "openai"
    llm_api_key: str = ""
    llm_base_url: str = ""
    llm_timeout_seconds: int = 30
    contract_terms_model: str = "gpt-4o-mini"
    insights_model: str = "gpt-4o"

    budget_daily_limit_cents: int = 500
    budget_monthly_limit_cents: int = 5000
