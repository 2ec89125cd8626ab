from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = "INFO"

    aws_region: str = "us-east-1"
    aws_connect_timeout_seconds: int = 5
    aws_read_timeout_seconds: int = 60

    db_host: str = "host.docker.internal"
    db_port: int = 5432
    db_database: str = "document_processor"
    db_username: str = "document_processor"
    db_password: str = "secret"
    db_pool_max_size: int = 4

    llm_provider: str = "claude"
    llm_model_id: str = ""

    openai_api_key: str = ""
    openai_base_url: str = ""
    openai_timeout_seconds: int = 30

    ocr_max_object_size_bytes: int = 10_000_000
