import os
from datetime import datetime, timezone

import pytest

# config.database.session 이 import 시점에 엔진을 만들기 때문에 앱 import 전에 설정한다.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("DB_INIT_SCHEMA", "false")

from video.application.port.video_repository_port import VideoRepositoryPort  # noqa: E402
from video.domain.video_record import VideoRecord  # noqa: E402


class FakeVideoRepository(VideoRepositoryPort):
    def __init__(self, records=None, error: Exception | None = None):
        self.records = list(records or [])
        self.error = error
        self.calls = 0

    def fetch_all(self) -> list[VideoRecord]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.records)


@pytest.fixture
def sample_records() -> list[VideoRecord]:
    return [
        VideoRecord(
            id="v1",
            title="Morning Routine Vlog",
            description="My daily morning routine",
            channel="daily",
            published_at=datetime(2024, 1, 5, 9, 0, tzinfo=timezone.utc),
            views=1000,
            likes=100,
            comment_count=10,
            topics="Lifestyle;Health",
            tags="vlog;morning",
            hash_tags="#vlog;#routine",
        ),
        VideoRecord(
            id="v2",
            title="Cooking Pasta",
            description="Quick pasta recipe",
            channel="kitchen",
            published_at=datetime(2024, 1, 10, 18, 30, tzinfo=timezone.utc),
            views=500,
            likes=80,
            comment_count=4,
            topics="Food",
            tags="recipe;pasta",
            hash_tags="#food;#recipe",
        ),
        VideoRecord(
            id="v3",
            title="Evening Routine",
            description="",
            channel="daily",
            published_at=datetime(2024, 2, 1, 21, 0, tzinfo=timezone.utc),
            views=1500,
            likes=120,
            comment_count=30,
            topics="Lifestyle",
            tags="vlog;evening",
            hash_tags="#vlog",
        ),
        VideoRecord(
            id="v4",
            title="Pasta Vlog",
            description="Cooking in the evening",
            channel="kitchen",
            published_at=None,
            views=500,
            likes=20,
            comment_count=1,
            topics="Food;Lifestyle",
            tags="pasta",
            hash_tags="",
        ),
    ]


@pytest.fixture
def fake_repository(sample_records) -> FakeVideoRepository:
    return FakeVideoRepository(sample_records)


@pytest.fixture
def repository_factory():
    return FakeVideoRepository
