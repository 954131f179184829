import logging

from config.database.session import SessionLocal
from video.application.port.video_repository_port import VideoRepositoryPort
from video.domain.video_record import VideoRecord
from video.infrastructure.orm.models import VideoORM

logger = logging.getLogger(__name__)

_COLUMNS = [column.name for column in VideoORM.__table__.columns]


class VideoRepositoryImpl(VideoRepositoryPort):
    def __init__(self, session_factory=SessionLocal):
        self.session_factory = session_factory

    def fetch_all(self) -> list[VideoRecord]:
        """
        videos 테이블 전체를 조회 순서 그대로 VideoRecord 리스트로 반환한다. (SELECT * FROM videos)
        """
        with self.session_factory() as db:
            rows = db.query(VideoORM).all()
            records = [self._to_domain(row) for row in rows]
        logger.info("fetched %d videos", len(records))
        return records

    @staticmethod
    def _to_domain(orm: VideoORM) -> VideoRecord:
        return VideoRecord.from_row({name: getattr(orm, name) for name in _COLUMNS})
