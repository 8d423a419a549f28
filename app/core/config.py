from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional

class Settings(BaseSettings):
    PROJECT_NAME: str = "Eat With The Locals API"
    ROOT_PATH: str = ""
    API_V1_STR: str = "/api/v1"
    ENVIRONMENT: str = "development"

    # Database
    DATABASE_URL: str = "sqlite:///./eat_with_locals.db"

    # CORS
    # In production, you would handle this more robustly, possibly parsing a comma-separated string
    CORS_ORIGINS: List[str] = [
        "http://localhost:5173", 
        "http://localhost:3000"
    ]

    # Rate limiting, applied per client IP
    RATE_LIMIT: str = "120/minute"

    # Identity used when a request does not name a user
    DEFAULT_USERNAME: str = "default_user"
    DEFAULT_ADMIN_USERNAME: str = "admin_user"

    # Location search
    SEARCH_RADIUS_KM: float = 50.0
    # None keeps cached recipe sets forever
    RECIPE_CACHE_TTL_HOURS: Optional[int] = None

    # Recipe generation
    GENERATOR_ENABLED: bool = True
    GENERATOR_TIMEOUT_SECONDS: float = 20.0
    PERPLEXITY_API_KEY: Optional[str] = None
    PERPLEXITY_API_URL: str = "https://api.perplexity.ai/chat/completions"
    PERPLEXITY_MODEL: str = "llama-3-sonar-small-32k"

    model_config = SettingsConfigDict(case_sensitive=True, env_file=".env")

settings = Settings()
