import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()


def _env_int(name: str, default: int, minimum: int | None = None) -> int:
    try:
        value = int(os.getenv(name, str(default)))
    except ValueError:
        return default
    if minimum is not None and value < minimum:
        return default
    return value


@dataclass
class DatabaseSettings:
    host: str = os.getenv("DB_HOST", "localhost")
    user: str = os.getenv("DB_USER", "postgres")
    password: str = os.getenv("DB_PASSWORD", "")
    name: str = os.getenv("DB_NAME", "youtube")
    port: int = _env_int("DB_PORT", 5432)
    echo: bool = os.getenv("DB_ECHO", "false").lower() == "true"
    # 한국어 주석: DATABASE_URL이 있으면 개별 DB_* 값보다 우선한다. (테스트/로컬 sqlite 용)
    url: str | None = os.getenv("DATABASE_URL")
    init_schema: bool = os.getenv("DB_INIT_SCHEMA", "true").lower() == "true"


@dataclass
class ServerSettings:
    host: str = os.getenv("APP_HOST", "0.0.0.0")
    port: int = _env_int("APP_PORT", 5000)
    cors_origins: str = os.getenv("CORS_ORIGINS", "http://localhost:3000")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    def origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@dataclass
class DashboardSettings:
    top_n: int = _env_int("DASHBOARD_TOP_N", 10, minimum=1)
