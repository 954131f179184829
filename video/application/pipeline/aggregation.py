from __future__ import annotations

from typing import Dict, Iterable, List

from video.domain.category_aggregate import CategoryAggregate
from video.domain.video_field import CategoryField
from video.domain.video_record import VideoRecord

LABEL_DELIMITER = ";"

AggregateTable = Dict[str, CategoryAggregate]


def split_labels(raw: str, keep_empty: bool = False) -> List[str]:
    """
    "a; b;c" -> ["a", "b", "c"]. 구분자 이스케이프는 지원하지 않는다.
    """
    labels = [label.strip() for label in (raw or "").split(LABEL_DELIMITER)]
    if keep_empty:
        return labels
    return [label for label in labels if label]


def aggregate_categories(
    records: Iterable[VideoRecord], field: CategoryField, keep_empty: bool = False
) -> AggregateTable:
    """
    카테고리 필드를 라벨 단위로 쪼개 라벨별 조회수 합계(views)와 등장 횟수(frequency)를 누적한다.
    여러 라벨을 가진 레코드는 각 라벨에 조회수 전체가 반영된다.
    결과 dict 는 라벨 최초 등장 순서를 유지한다.
    """
    table: AggregateTable = {}
    for record in records:
        for label in split_labels(field.raw_labels(record), keep_empty=keep_empty):
            aggregate = table.get(label)
            if aggregate is None:
                aggregate = table[label] = CategoryAggregate(label=label)
            aggregate.add(record.views)
    return table


def aggregate_all(records: Iterable[VideoRecord], keep_empty: bool = False) -> Dict[CategoryField, AggregateTable]:
    items = list(records)
    return {field: aggregate_categories(items, field, keep_empty=keep_empty) for field in CategoryField}
