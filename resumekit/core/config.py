"""
Application configuration using Pydantic Settings
"""
from typing import List, Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Application
    APP_NAME: str = "ResumeKit"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = True

    # Observability
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    # Extraction
    # "rules" runs the deterministic engine only, "llm" tries the remote model first
    EXTRACTION_MODE: str = "rules"
    AI_PROVIDER: str = "openai"  # "openai" or "ollama"

    # OpenAI Configuration (Optional)
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_MODEL: str = "gpt-4o-mini"
    AI_TEMPERATURE: float = 0.1
    AI_MAX_TOKENS: int = 4096

    # Ollama Configuration
    OLLAMA_ENDPOINT: str = "http://localhost:11434"
    OLLAMA_MODEL: str = "qwen2.5:7b-instruct-q4_K_M"

    LLM_TIMEOUT_SECONDS: int = 60
    PROVIDER_COOLDOWN_SECONDS: int = 60

    # Redis (extraction cache)
    REDIS_URL: str = "redis://localhost:6379/0"
    REDIS_CACHE_TTL: int = 3600
    EXTRACTION_CACHE_ENABLED: bool = False

    # File Upload
    MAX_UPLOAD_SIZE_MB: int = 10
    ALLOWED_FILE_EXTENSIONS: List[str] = ["pdf"]

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:5173"]
    CORS_ALLOW_CREDENTIALS: bool = True

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
