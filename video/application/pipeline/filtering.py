from __future__ import annotations

import logging
from datetime import date, timezone
from typing import Iterable, List, Optional

from video.domain.filter_criteria import FilterCriteria
from video.domain.video_field import VideoField
from video.domain.video_record import VideoRecord

logger = logging.getLogger(__name__)


def filter_records(records: Iterable[VideoRecord], criteria: FilterCriteria) -> List[VideoRecord]:
    """
    모든 활성 조건(AND)을 만족하는 레코드만 새 리스트로 반환한다. 원본은 건드리지 않는다.
    - 텍스트 조건: 소문자 기준 부분 문자열 포함
    - 날짜 조건: published_at(UTC) 달력 날짜가 startDate ~ endDate 범위(양끝 포함)
    """
    constraints = criteria.text_constraints()
    out: List[VideoRecord] = []
    skipped_undated = 0

    for record in records:
        if not _matches_text(record, constraints):
            continue
        if criteria.has_date_range:
            if record.published_at is None:
                skipped_undated += 1
                continue
            if not _in_range(record.published_at.astimezone(timezone.utc).date(), criteria.start_date, criteria.end_date):
                continue
        out.append(record)

    if skipped_undated:
        logger.debug("excluded %d records without a valid published_at from date filter", skipped_undated)
    return out


def _matches_text(record: VideoRecord, constraints: list[tuple[VideoField, str]]) -> bool:
    for field, needle in constraints:
        haystack = field.value_of(record) or ""
        if needle not in haystack.lower():
            return False
    return True


def _in_range(day: date, start: Optional[date], end: Optional[date]) -> bool:
    if start is not None and day < start:
        return False
    if end is not None and day > end:
        return False
    return True
