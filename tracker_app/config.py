from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    
    Loading priority (highest to lowest):
    1. Environment variables
    2. .env file
    3. Default values below
    """
    
    # Environment
    environment: str = "development"
    debug: bool = True
    log_level: str = "INFO"
    
    # Application
    app_name: str = "Location Link Tracker"
    app_version: str = "1.0.0"
    
    # Server
    host: str = "127.0.0.1"
    port: int = 3000
    cors_origins: List[str] = ["*"]
    static_dir: Optional[str] = None  # Defaults to the packaged static/ folder
    
    # Database
    database_url: str = "sqlite:///./location_tracker.db"
    
    # Tracking links
    public_base_url: Optional[str] = None  # Overrides scheme://host taken from the request
    token_length: int = 16
    token_strategy: str = "random"  # Options: "random", "secrets"
    
    # Visit page
    trust_forwarded_for: bool = True  # Take caller IP from X-Forwarded-For when present
    fallback_url: str = "https://example.com/"
    fallback_delay_ms: int = 2000
    geolocation_timeout_ms: int = 5000
    
    # Pydantic v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Create settings instance
settings = Settings()
