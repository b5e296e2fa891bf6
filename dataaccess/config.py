from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # --- Basic configuration ---
    APP_NAME: str = "dataaccess"
    APP_ENV: str = "development"  # development, production, testing
    DEBUG: bool = True

    # --- Database access ---
    DEFAULT_BACKEND: str = "mssql"  # mssql, mysql, postgresql
    SQL_ECHO: bool = False  # Forwarded to engine echo
    MSSQL_ODBC_DRIVER: str = "ODBC Driver 18 for SQL Server"

    # --- Logging ---
    LOG_DIR: str = "logs"
    LOG_LEVEL: str = "INFO"

    # --- Pydantic ---
    # Load env from project root .env; priority: env vars > .env > defaults
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_ignore_empty=True,
    )


# Singleton settings instance
settings = Settings()
