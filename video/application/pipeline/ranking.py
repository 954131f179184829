from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from video.application.pipeline.aggregation import AggregateTable
from video.domain.category_aggregate import CategoryAggregate
from video.domain.chart_projection import ChartProjection
from video.domain.video_field import CategoryField, Metric

DEFAULT_TOP_N = 10

Projections = Dict[CategoryField, Dict[Metric, ChartProjection]]


def rank_categories(table: AggregateTable, metric: Metric) -> List[CategoryAggregate]:
    # 지표 값 내림차순, 동점은 기존 순서 유지(안정 정렬)
    return sorted(table.values(), key=metric.value_of, reverse=True)


def project(
    table: AggregateTable,
    metric: Metric,
    top_n: int = DEFAULT_TOP_N,
    category_field: CategoryField = CategoryField.HASH_TAGS,
) -> ChartProjection:
    """
    집계 테이블을 지표 기준으로 다시 랭킹하고 상위 top_n 개만 차트 데이터로 투영한다.
    지표를 바꿔도 집계 테이블은 다시 계산할 필요가 없다.
    """
    if top_n < 1:
        raise ValueError(f"top_n must be >= 1, got {top_n}")
    ranked = rank_categories(table, metric)[:top_n]
    return ChartProjection(
        category_field=category_field,
        metric=metric,
        labels=tuple(a.label for a in ranked),
        values=tuple(metric.value_of(a) for a in ranked),
    )


def project_all(
    tables: Dict[CategoryField, AggregateTable],
    top_n: int = DEFAULT_TOP_N,
    metrics: Optional[Iterable[Metric]] = None,
) -> Projections:
    # 카테고리 필드 3개 x 지표 3개 = 최대 9개 차트. 데이터가 작으므로 한 번에 계산한다.
    selected = list(metrics) if metrics is not None else list(Metric)
    return {
        field: {metric: project(table, metric, top_n=top_n, category_field=field) for metric in selected}
        for field, table in tables.items()
    }
