import logging
from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from typing import Any, Mapping, Optional

from video.domain.errors import MalformedDateError, MissingFieldError

logger = logging.getLogger(__name__)

TEXT_COLUMNS = ("id", "channel", "title", "description", "topics", "tags", "hash_tags")
COUNT_COLUMNS = ("views", "likes", "dislikes", "comment_count")


def parse_timestamp(value: Any) -> datetime:
    """
    published_at 값을 timezone-aware datetime으로 변환한다.
    - naive datetime / 날짜 문자열은 UTC로 간주한다.
    - 파싱할 수 없으면 MalformedDateError.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.min)
    elif isinstance(value, str) and value.strip():
        # "2024-01-20T12:34:56Z" 형태
        try:
            parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError as exc:
            raise MalformedDateError(value) from exc
    else:
        raise MalformedDateError(value)

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_calendar_date(value: Any) -> date:
    """필터 입력(startDate/endDate)을 달력 날짜로 변환한다."""
    if isinstance(value, datetime):
        return parse_timestamp(value).astimezone(timezone.utc).date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return date.fromisoformat(text)
        except ValueError:
            return parse_timestamp(text).astimezone(timezone.utc).date()
    raise MalformedDateError(value)


def _required(row: Mapping[str, Any], column: str) -> Any:
    if column not in row or row[column] is None:
        raise MissingFieldError(column)
    return row[column]


def _text(row: Mapping[str, Any], column: str) -> str:
    try:
        return str(_required(row, column))
    except MissingFieldError:
        return ""


def _count(row: Mapping[str, Any], column: str) -> int:
    try:
        value = int(_required(row, column))
    except MissingFieldError:
        return 0
    except (TypeError, ValueError):
        logger.debug("non-numeric %s=%r normalized to 0", column, row.get(column))
        return 0
    return max(value, 0)


def _timestamp(row: Mapping[str, Any]) -> Optional[datetime]:
    try:
        return parse_timestamp(_required(row, "published_at"))
    except MissingFieldError:
        return None
    except MalformedDateError as exc:
        logger.debug("video %s: %s", row.get("id"), exc)
        return None


@dataclass(frozen=True)
class VideoRecord:
    id: str
    title: str = ""
    description: str = ""
    channel: str = ""
    published_at: Optional[datetime] = None
    views: int = 0
    likes: int = 0
    dislikes: int = 0
    comment_count: int = 0
    topics: str = ""
    tags: str = ""
    hash_tags: str = ""

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "VideoRecord":
        # 한국어 주석: 누락/NULL 필드는 빈 문자열·0·None 으로 정규화해 파이프라인 전체가 실패하지 않도록 한다.
        values: dict[str, Any] = {column: _text(row, column) for column in TEXT_COLUMNS}
        values.update({column: _count(row, column) for column in COUNT_COLUMNS})
        values["published_at"] = _timestamp(row)
        return cls(**values)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "channel": self.channel,
            "title": self.title,
            "description": self.description,
            "published_at": self.published_at.isoformat() if self.published_at else None,
            "views": self.views,
            "likes": self.likes,
            "dislikes": self.dislikes,
            "comment_count": self.comment_count,
            "topics": self.topics,
            "tags": self.tags,
            "hash_tags": self.hash_tags,
        }
