import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.database.session import init_db_schema
from config.logging_config import configure_logging
from config.settings import DatabaseSettings, ServerSettings
from video.adapter.input.web.dashboard_router import dashboard_router

load_dotenv()
configure_logging()

logger = logging.getLogger(__name__)
server_settings = ServerSettings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan 훅. DB 스키마 미존재 시 자동 생성하여 UndefinedTable 오류를 예방합니다.
    """
    if DatabaseSettings().init_schema:
        init_db_schema()
    logger.info("video dashboard server started")
    yield
    logger.info("video dashboard server stopped")


app = FastAPI(title="YouTube Video Dashboard", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=server_settings.origin_list() or ["http://localhost:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(dashboard_router, prefix="/api")


@app.get("/health")
def health_check() -> dict[str, str]:
    """
    헬스체크 엔드포인트입니다.
    """
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=server_settings.host, port=server_settings.port)
