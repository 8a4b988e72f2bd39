import json
from typing import List, Optional
from urllib.parse import quote_plus, urlsplit, urlunsplit

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    All settings can be configured via .env file or environment variables.
    """

    # =============================================================================
    # APPLICATION
    # =============================================================================
    PROJECT_NAME: str = "Student Records API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    API_PREFIX: str = ""

    # =============================================================================
    # SERVER
    # =============================================================================
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # =============================================================================
    # MONGODB - Individual components
    # =============================================================================
    MONGO_HOST: str = "localhost"
    MONGO_PORT: int = 27017
    MONGO_USER: str = ""
    MONGO_PASSWORD: str = ""
    MONGO_DB: str = "school"
    MONGO_COLLECTION: str = "students"

    # Connection URL - set directly or built from the MONGO_* components
    MONGODB_URL: Optional[str] = Field(default=None, validate_default=True)

    # =============================================================================
    # CONNECTION POOL SETTINGS (driver defaults)
    # =============================================================================
    MONGO_MAX_POOL_SIZE: int = 100
    MONGO_SERVER_SELECTION_TIMEOUT_MS: int = 30000
    # Startup and /health ping only
    MONGO_PING_TIMEOUT_MS: int = 2000

    # =============================================================================
    # CORS
    # =============================================================================
    BACKEND_CORS_ORIGINS: List[str] = ["*"]

    # =============================================================================
    # LOGGING
    # =============================================================================
    LOG_LEVEL: str = "INFO"

    @field_validator("MONGODB_URL", mode="before")
    @classmethod
    def build_mongodb_url(cls, v: Optional[str], info) -> str:
        """
        Build MONGODB_URL from components if not provided.

        Priority:
        1. Use MONGODB_URL if explicitly set in .env
        2. Build from MONGO_* components
        """
        if isinstance(v, str) and v:
            return v

        host = info.data.get("MONGO_HOST")
        port = info.data.get("MONGO_PORT")
        user = info.data.get("MONGO_USER")
        password = info.data.get("MONGO_PASSWORD")

        if user:
            return f"mongodb://{quote_plus(user)}:{quote_plus(password)}@{host}:{port}"
        return f"mongodb://{host}:{port}"

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from string or list."""
        if isinstance(v, str):
            return json.loads(v)
        return v

    def masked_mongodb_url(self) -> str:
        """MONGODB_URL with the password replaced, safe for logs."""
        parts = urlsplit(self.MONGODB_URL)
        userinfo, at, hosts = parts.netloc.rpartition("@")
        if not at or ":" not in userinfo:
            return self.MONGODB_URL

        # netloc may list several hosts, so it is rebuilt by hand
        user = userinfo.split(":", 1)[0]
        return urlunsplit(parts._replace(netloc=f"{user}:***@{hosts}"))

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )


# Create global settings instance
settings = Settings()


# Helper function to display current config (for debugging)
def print_config(config: Settings = settings):
    """Print current configuration (hide sensitive data)."""
    print("=" * 80)
    print("CURRENT CONFIGURATION")
    print("=" * 80)
    print(f"Project Name: {config.PROJECT_NAME}")
    print(f"Version: {config.APP_VERSION}")
    print(f"Debug Mode: {config.DEBUG}")
    print(f"API Prefix: {config.API_PREFIX or '/'}")
    print("-" * 80)
    print(f"MongoDB Host: {config.MONGO_HOST}:{config.MONGO_PORT}")
    print(f"Database: {config.MONGO_DB}")
    print(f"Collection: {config.MONGO_COLLECTION}")
    print(f"MongoDB URL: {config.masked_mongodb_url()}")
    print("-" * 80)
    print(f"Max Pool Size: {config.MONGO_MAX_POOL_SIZE}")
    print(f"Server Selection Timeout (ms): {config.MONGO_SERVER_SELECTION_TIMEOUT_MS}")
    print(f"Ping Timeout (ms): {config.MONGO_PING_TIMEOUT_MS}")
    print(f"CORS Origins: {config.BACKEND_CORS_ORIGINS}")
    print("=" * 80)


if __name__ == "__main__":
    # Test config loading
    print_config()
