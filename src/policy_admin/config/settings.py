"""Application settings and configuration management using Pydantic."""

from functools import lru_cache
from typing import Optional

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Main application settings combining all configuration sections."""

    # Environment and deployment
    environment: str = "development"
    debug: bool = False

    # API settings
    endpoint_host: str = "0.0.0.0"
    endpoint_port: int = 8000
    api_reload: bool = False
    api_log_level: str = "INFO"

    # Firestore settings
    firestore_project_id: Optional[str] = None
    firestore_database: str = "(default)"

    # Admin authentication
    admin_auth_token: Optional[str] = None
    session_cookie_name: str = "admin_session"
    session_cookie_secure: bool = False
    session_max_age_seconds: int = 8 * 3600

    # Party cache
    party_cache_ttl_seconds: int = 300  # 0 disables expiry
    party_cache_warm_on_startup: bool = False

    # Policy pagination
    policy_page_size: int = 5
    policy_max_page_size: int = 50

    # Logging settings
    log_level: str = "INFO"
    log_format: str = "structured"  # 'structured' or 'plain'
    log_file_enabled: bool = False
    log_file_path: str = "data/policy_admin.log"
    log_max_file_size: str = "10MB"
    log_backup_count: int = 5

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",  # Ignore extra environment variables
    }

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        """Validate environment setting."""
        valid_environments = ["development", "testing", "production"]
        if v.lower() not in valid_environments:
            raise ValueError(f"Environment must be one of: {valid_environments}")
        return v.lower()

    @field_validator("endpoint_port")
    @classmethod
    def validate_port(cls, v):
        """Validate port number is in valid range."""
        if v < 1 or v > 65535:
            raise ValueError("Port must be between 1 and 65535")
        return v

    @field_validator("party_cache_ttl_seconds", "session_max_age_seconds")
    @classmethod
    def validate_non_negative(cls, v):
        """Durations cannot be negative."""
        if v < 0:
            raise ValueError("Duration must be zero or positive")
        return v

    @field_validator("log_level", "api_log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v):
        """Validate log format."""
        valid_formats = ["structured", "plain"]
        if v.lower() not in valid_formats:
            raise ValueError(f"Log format must be one of: {valid_formats}")
        return v.lower()

    @model_validator(mode="after")
    def validate_page_sizes(self):
        """Default page size must fit inside the allowed range."""
        if self.policy_max_page_size < 1:
            raise ValueError("policy_max_page_size must be at least 1")
        if not 1 <= self.policy_page_size <= self.policy_max_page_size:
            raise ValueError(
                f"policy_page_size must be between 1 and {self.policy_max_page_size}"
            )
        return self

    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == "development"

    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == "production"

    def is_testing(self) -> bool:
        """Check if running in testing mode."""
        return self.environment == "testing"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached application settings.

    Returns:
        Settings: Application configuration instance
    """
    return Settings()


def validate_required_settings() -> bool:
    """
    Validate that all required settings are properly configured.

    Returns:
        bool: True if all required settings are valid, False otherwise
    """
    try:
        settings = get_settings()
    except ValueError as e:
        print(f"Configuration validation failed: {e}")
        return False

    missing = [
        name
        for name in get_required_env_vars()
        if not getattr(settings, name.lower(), None)
    ]
    if missing:
        print(f"Configuration validation failed, missing: {', '.join(missing)}")
        return False

    return True


def get_required_env_vars() -> list[str]:
    """
    Get list of required environment variables.

    Returns:
        list: List of required environment variable names
    """
    return ["ADMIN_AUTH_TOKEN"]
