import os
from dotenv import load_dotenv
from sqlalchemy.engine import URL

load_dotenv()


class Settings:
    # Database (individual parts, DATABASE_URL wins when set)
    db_host: str = os.getenv("DB_HOST", "localhost")
    db_user: str = os.getenv("DB_USER", "floorstock")
    db_password: str = os.getenv("DB_PASSWORD", "floorstock")
    db_name: str = os.getenv("DB_NAME", "floorstock")
    db_port: int = int(os.getenv("DB_PORT", "5432"))
    database_url_override: str = os.getenv("DATABASE_URL", "").strip()
    database_echo: bool = os.getenv("DATABASE_ECHO", "False").lower() == "true"
    db_pool_size: int = int(os.getenv("DB_POOL_SIZE", "10"))

    # HTTP / WebSocket server
    port: int = int(os.getenv("PORT", "3000"))
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def database_url(self) -> str:
        if self.database_url_override:
            return self.database_url_override
        return URL.create(
            "postgresql+asyncpg",
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        ).render_as_string(hide_password=False)

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


settings = Settings()
