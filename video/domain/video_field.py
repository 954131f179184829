from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable

from video.domain.category_aggregate import CategoryAggregate
from video.domain.errors import UnknownFieldError
from video.domain.video_record import VideoRecord

_EPOCH_FLOOR = datetime.min.replace(tzinfo=timezone.utc)


class VideoField(str, Enum):
    ID = "id"
    CHANNEL = "channel"
    TITLE = "title"
    DESCRIPTION = "description"
    PUBLISHED_AT = "published_at"
    VIEWS = "views"
    LIKES = "likes"
    DISLIKES = "dislikes"
    COMMENT_COUNT = "comment_count"
    TOPICS = "topics"
    TAGS = "tags"
    HASH_TAGS = "hash_tags"

    @classmethod
    def parse(cls, name: str) -> "VideoField":
        key = (name or "").strip().lower()
        for field in cls:
            if field.value == key:
                return field
        raise UnknownFieldError("field", name, [f.value for f in cls])

    def value_of(self, record: VideoRecord) -> Any:
        return _ACCESSORS[self](record)

    def sort_key(self, record: VideoRecord) -> Any:
        value = self.value_of(record)
        # published_at 이 없는 레코드는 가장 오래된 값으로 취급한다.
        if self is VideoField.PUBLISHED_AT and value is None:
            return _EPOCH_FLOOR
        return value


_ACCESSORS: dict[VideoField, Callable[[VideoRecord], Any]] = {
    VideoField.ID: lambda r: r.id,
    VideoField.CHANNEL: lambda r: r.channel,
    VideoField.TITLE: lambda r: r.title,
    VideoField.DESCRIPTION: lambda r: r.description,
    VideoField.PUBLISHED_AT: lambda r: r.published_at,
    VideoField.VIEWS: lambda r: r.views,
    VideoField.LIKES: lambda r: r.likes,
    VideoField.DISLIKES: lambda r: r.dislikes,
    VideoField.COMMENT_COUNT: lambda r: r.comment_count,
    VideoField.TOPICS: lambda r: r.topics,
    VideoField.TAGS: lambda r: r.tags,
    VideoField.HASH_TAGS: lambda r: r.hash_tags,
}

# 부분 문자열 필터를 지원하는 컬럼 (id 제외)
FILTERABLE_FIELDS = (
    VideoField.TITLE,
    VideoField.DESCRIPTION,
    VideoField.CHANNEL,
    VideoField.TOPICS,
    VideoField.TAGS,
    VideoField.HASH_TAGS,
)


class CategoryField(str, Enum):
    HASH_TAGS = "hash_tags"
    TOPICS = "topics"
    TAGS = "tags"

    @property
    def tab(self) -> str:
        return _TABS[self]

    @property
    def column(self) -> VideoField:
        return VideoField(self.value)

    @classmethod
    def parse(cls, name: str) -> "CategoryField":
        key = (name or "").strip().lower()
        for field in cls:
            if key in (field.value, field.tab):
                return field
        raise UnknownFieldError("category field", name, [f.tab for f in cls])

    def raw_labels(self, record: VideoRecord) -> str:
        return self.column.value_of(record)


_TABS = {
    CategoryField.HASH_TAGS: "hashtags",
    CategoryField.TOPICS: "topics",
    CategoryField.TAGS: "tags",
}


class Metric(str, Enum):
    VIEWS = "views"
    FREQUENCY = "frequency"
    EFFECTIVENESS = "effectiveness"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def color(self) -> str:
        return _COLORS[self]

    @property
    def border_color(self) -> str:
        return self.color.replace("0.6", "1")

    @classmethod
    def parse(cls, name: str) -> "Metric":
        key = (name or "").strip().lower()
        for metric in cls:
            if metric.value == key:
                return metric
        raise UnknownFieldError("metric", name, [m.value for m in cls])

    def value_of(self, aggregate: CategoryAggregate) -> float:
        if self is Metric.VIEWS:
            return aggregate.views
        if self is Metric.FREQUENCY:
            return aggregate.frequency
        return aggregate.effectiveness


_COLORS = {
    Metric.VIEWS: "rgba(75, 192, 192, 0.6)",
    Metric.FREQUENCY: "rgba(255, 206, 86, 0.6)",
    Metric.EFFECTIVENESS: "rgba(153, 102, 255, 0.6)",
}


class SortDirection(str, Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"

    @classmethod
    def parse(cls, name: str) -> "SortDirection":
        key = (name or "").strip().lower()
        if key in ("ascending", "asc"):
            return cls.ASCENDING
        if key in ("descending", "desc"):
            return cls.DESCENDING
        raise UnknownFieldError("sort direction", name, [d.value for d in cls])
