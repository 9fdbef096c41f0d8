from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    app_env: str = "dev"
    app_version: str = "1.0.0"
    log_level: str = "INFO"
    port: int = 3001
    database_url: str = "sqlite+aiosqlite:///./docops.db"

    cors_allowed_origins: list[str] = [
        "https://vercel-frontend-feni.vercel.app",
        "http://localhost:5173",
    ]

    openai_api_key: str | None = None
    openai_model: str = "gpt-5-mini-2025-08-07"

    class Config:
        env_file = ".env"
        extra = "ignore"

    @property
    def is_development(self) -> bool:
        return self.app_env.lower() in {"dev", "development"}

    @property
    def is_production(self) -> bool:
        return self.app_env.lower() in {"prod", "production"}

settings = Settings()
