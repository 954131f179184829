import logging

from config.settings import ServerSettings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """
    LOG_LEVEL 환경 변수(기본 INFO) 기준으로 루트 로거를 한 번 설정한다.
    """
    level_name = (level or ServerSettings().log_level or "INFO").upper()
    logging.basicConfig(level=getattr(logging, level_name, logging.INFO), format=LOG_FORMAT)
