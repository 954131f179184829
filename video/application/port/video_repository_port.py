from abc import ABC, abstractmethod

from video.domain.video_record import VideoRecord


class VideoRepositoryPort(ABC):
    # 조회 전용: 대시보드는 videos 테이블 전체를 한 번에 읽어 메모리에서 가공한다.
    @abstractmethod
    def fetch_all(self) -> list[VideoRecord]:
        raise NotImplementedError
