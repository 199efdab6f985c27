"""
Application Configuration - Environment Variables & Settings
"""
from pydantic_settings import BaseSettings
from pydantic import AliasChoices, Field, computed_field
from typing import List, Optional
from functools import lru_cache


# Values shipped in .env.example; treated the same as "not set"
SUPABASE_URL_PLACEHOLDER = "your_supabase_url_here"
SUPABASE_ANON_KEY_PLACEHOLDER = "your_supabase_anon_key_here"

PLACEHOLDER_IMAGE_URL = (
    "https://images.pexels.com/photos/1287460/pexels-photo-1287460.jpeg"
    "?auto=compress&cs=tinysrgb&w=1200"
)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables
    """
    # Application
    DEBUG: bool = Field(default=False)
    APP_NAME: str = Field(default="Wanderlust API")

    # Backend-as-a-service (Supabase). Both must be set for remote mode.
    SUPABASE_URL: str = Field(
        default="",
        validation_alias=AliasChoices("SUPABASE_URL", "VITE_SUPABASE_URL"),
    )
    SUPABASE_ANON_KEY: str = Field(
        default="",
        validation_alias=AliasChoices("SUPABASE_ANON_KEY", "VITE_SUPABASE_ANON_KEY"),
    )
    SUPABASE_TABLE: str = Field(default="destinations")
    SUPABASE_STORAGE_BUCKET: str = Field(default="images")
    SUPABASE_STORAGE_PREFIX: str = Field(default="destination-images")
    # None = no client-side timeout
    SUPABASE_TIMEOUT_SECONDS: Optional[float] = Field(default=None)

    # Catalog
    SEARCH_RESULT_LIMIT: int = Field(default=10)
    FEATURED_COUNTRY: str = Field(default="Nepal")
    FEATURED_LIMIT: int = Field(default=6)
    PLACEHOLDER_IMAGE_URL: str = Field(default=PLACEHOLDER_IMAGE_URL)

    # CORS - stored as comma-separated string
    ALLOWED_ORIGINS_STR: str = Field(
        default="http://localhost:5173,http://localhost:3000",
        alias="ALLOWED_ORIGINS"
    )

    @computed_field
    @property
    def ALLOWED_ORIGINS(self) -> List[str]:
        """Parse comma-separated origins into list"""
        return [origin.strip() for origin in self.ALLOWED_ORIGINS_STR.split(',') if origin.strip()]

    @computed_field
    @property
    def supabase_configured(self) -> bool:
        """
        True only when both connection parameters are real values and the
        endpoint uses https. Anything else selects the in-memory catalog.
        """
        url = self.SUPABASE_URL.strip()
        key = self.SUPABASE_ANON_KEY.strip()
        return bool(
            url
            and key
            and url != SUPABASE_URL_PLACEHOLDER
            and key != SUPABASE_ANON_KEY_PLACEHOLDER
            and url.startswith("https://")
        )

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"
        populate_by_name = True


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance
    """
    return Settings()


# Global settings instance
settings = get_settings()
