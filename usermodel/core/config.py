from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Manages all application settings. Loads variables from environment and a .env file.
    """

    # --- Application Metadata ---
    PROJECT_NAME: str = "usermodel"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # --- Database Configuration ---
    # Production deployments point this at postgresql+asyncpg://...
    ASYNC_DATABASE_URL: str = "sqlite+aiosqlite:///./usermodel.db"

    # --- Auditing ---
    # Identity recorded in created_by / last_modified_by when no auditor is bound
    AUDIT_DEFAULT_USER: str = "SYSTEM"

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        extra="ignore",
    )


settings = Settings()
