from __future__ import annotations

from typing import Iterable, List, Optional

from video.domain.sort_spec import SortSpec
from video.domain.video_record import VideoRecord


def sort_records(records: Iterable[VideoRecord], sort_spec: Optional[SortSpec]) -> List[VideoRecord]:
    # 정렬 조건이 없으면 입력(필터 결과) 순서를 그대로 유지한다.
    if sort_spec is None:
        return list(records)
    # sorted 는 안정 정렬이라 reverse=True 여도 동일 키의 상대 순서가 유지된다.
    return sorted(records, key=sort_spec.key.sort_key, reverse=sort_spec.descending)
