from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    PROJECT_NAME: str = "Storefront"
    ENVIRONMENT: str = "development"

    # --- Sessions ---
    SESSION_SECRET: str = "storefront-dev-session-secret"
    SESSION_MAX_AGE: int = 60 * 60 * 24  # one day

    # --- Seeded admin account ---
    ADMIN_USERNAME: str = "admin"
    ADMIN_PASSWORD: str = "admin"

    # --- Storefront client ---
    API_BASE_URL: str = "http://localhost:8000"
    CART_STORAGE_DIR: str = ".storefront"

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() in ("production", "staging")


settings = Settings()
