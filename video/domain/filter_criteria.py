import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional

from video.domain.errors import MalformedDateError
from video.domain.video_field import FILTERABLE_FIELDS, VideoField
from video.domain.video_record import parse_calendar_date

logger = logging.getLogger(__name__)

_DATE_KEYS = {
    "start_date": ("startDate", "start_date"),
    "end_date": ("endDate", "end_date"),
}


def _optional_date(value: Any, key: str) -> Optional[date]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    try:
        return parse_calendar_date(value)
    except MalformedDateError as exc:
        # 잘못된 날짜 입력은 제약 없음으로 취급한다.
        logger.warning("ignoring %s filter: %s", key, exc)
        return None


@dataclass(frozen=True)
class FilterCriteria:
    title: str = ""
    description: str = ""
    channel: str = ""
    topics: str = ""
    tags: str = ""
    hash_tags: str = ""
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "FilterCriteria":
        """
        테이블 화면의 필터 입력(title, description, topics, tags, hash_tags, startDate, endDate)을
        FilterCriteria로 변환한다. 값이 없거나 빈 문자열이면 제약 없음. 입력값은 가공하지 않고 그대로 비교한다.
        """
        values: dict[str, Any] = {}
        for field in FILTERABLE_FIELDS:
            raw = mapping.get(field.value)
            values[field.value] = "" if raw is None else str(raw)
        for attr, keys in _DATE_KEYS.items():
            raw = next((mapping[k] for k in keys if mapping.get(k) not in (None, "")), None)
            values[attr] = _optional_date(raw, keys[0])
        return cls(**values)

    def text_constraints(self) -> list[tuple[VideoField, str]]:
        return [
            (field, getattr(self, field.value).lower())
            for field in FILTERABLE_FIELDS
            if getattr(self, field.value)
        ]

    @property
    def has_date_range(self) -> bool:
        return self.start_date is not None or self.end_date is not None

    @property
    def active_fields(self) -> list[str]:
        active = [field.value for field, _ in self.text_constraints()]
        if self.start_date is not None:
            active.append("startDate")
        if self.end_date is not None:
            active.append("endDate")
        return active

    @property
    def is_empty(self) -> bool:
        return not self.active_fields
