import urllib.parse

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from config.settings import DatabaseSettings

settings = DatabaseSettings()


def build_database_url(db: DatabaseSettings) -> str:
    """
    DB_* 환경 변수(DB_HOST, DB_USER, DB_PASSWORD, DB_NAME, DB_PORT)로 PostgreSQL 접속 URL을 만든다.
    DATABASE_URL이 지정되어 있으면 그대로 사용한다.
    """
    if db.url:
        return db.url
    password = urllib.parse.quote_plus(db.password)
    return f"postgresql+psycopg2://{db.user}:{password}@{db.host}:{db.port}/{db.name}"


DATABASE_URL = build_database_url(settings)

engine = create_engine(
    DATABASE_URL,
    echo=settings.echo,
    pool_pre_ping=True,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def init_db_schema():
    """
    애플리케이션 기동 시 videos 테이블이 없을 경우를 대비해 스키마를 생성합니다.
    """
    Base.metadata.create_all(bind=engine)
