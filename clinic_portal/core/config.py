from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from clinic_portal.core.exceptions import UnknownDomainError

PRODUCTION_ENV = "production"


class Settings(BaseSettings):
    app_env: str = "local"
    log_level: str = "INFO"

    # One relational store per domain service
    auth_database_url: str = "sqlite:///./data/auth.db"
    hr_database_url: str = "sqlite:///./data/hr.db"
    inventory_database_url: str = "sqlite:///./data/inventory.db"
    marketing_database_url: str = "sqlite:///./data/marketing.db"

    # Demo logins created by the auth seeder
    seed_user_password: str = "admin1234"

    # Portal API (gateway in front of the domain services)
    api_base_url: str = "http://localhost:3000/api"
    api_timeout_seconds: float = 30.0

    # Pydantic v2 style config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        return self.app_env.strip().lower() == PRODUCTION_ENV

    def database_url_for(self, domain: str) -> str:
        """
        Resolve the store URL for one domain (auth, hr, inventory, marketing).
        """
        url = getattr(self, f"{domain}_database_url", None)
        if not isinstance(url, str):
            raise UnknownDomainError(domain)
        return url


@lru_cache()
def get_settings() -> Settings:
    """
    Cached settings instance so the .env is parsed once.
    """
    return Settings()
