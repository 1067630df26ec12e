from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Application
    app_name: str = "content-analyzer"
    app_version: str = "0.1.0"
    log_level: str = "INFO"

    # Server
    host: str = "127.0.0.1"
    port: int = 8083
    port_attempts: int = 10

    # Uploads
    max_upload_bytes: int = 15 * 1024 * 1024
    upload_overhead_bytes: int = 64 * 1024  # multipart envelope on top of the file itself
    upload_dir: str | None = None

    # Analysis
    preview_chars: int = 1200
    ocr_language: str = "eng"
    extraction_timeout_seconds: float | None = 120.0

    # Frontend
    cors_origins: list[str] = ["*"]
    frontend_dir: str | None = None

    @property
    def max_upload_mb(self) -> float:
        return self.max_upload_bytes / (1024 * 1024)


settings = Settings()
