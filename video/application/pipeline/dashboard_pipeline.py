from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

from video.application.pipeline.aggregation import aggregate_all, aggregate_categories
from video.application.pipeline.filtering import filter_records
from video.application.pipeline.ranking import DEFAULT_TOP_N, Projections, project_all
from video.application.pipeline.sorting import sort_records
from video.domain.chart_projection import ChartProjection
from video.domain.filter_criteria import FilterCriteria
from video.domain.sort_spec import SortSpec
from video.domain.video_field import CategoryField, Metric
from video.domain.video_record import VideoRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TableView:
    total: int
    items: tuple[VideoRecord, ...]
    sort: Optional[SortSpec] = None

    @property
    def filtered(self) -> int:
        return len(self.items)

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "filtered": self.filtered,
            "sort": self.sort.to_dict() if self.sort else None,
            "items": [r.to_dict() for r in self.items],
        }


@dataclass(frozen=True)
class DashboardView:
    table: TableView
    projections: Projections = field(default_factory=dict)
    category_field: CategoryField = CategoryField.HASH_TAGS
    metric: Metric = Metric.VIEWS

    @property
    def selected(self) -> ChartProjection:
        return self.projections[self.category_field][self.metric]


def build_table_view(
    records: Sequence[VideoRecord], criteria: FilterCriteria, sort_spec: Optional[SortSpec] = None
) -> TableView:
    filtered = filter_records(records, criteria)
    rows = sort_records(filtered, sort_spec)
    logger.debug("table view: %d/%d records (filters=%s)", len(rows), len(records), criteria.active_fields)
    return TableView(total=len(records), items=tuple(rows), sort=sort_spec)


def build_projections(
    records: Iterable[VideoRecord],
    top_n: int = DEFAULT_TOP_N,
    fields: Optional[Iterable[CategoryField]] = None,
    metrics: Optional[Iterable[Metric]] = None,
) -> Projections:
    items = list(records)
    if fields is None:
        tables = aggregate_all(items)
    else:
        tables = {f: aggregate_categories(items, f) for f in fields}
    return project_all(tables, top_n=top_n, metrics=metrics)


def run_pipeline(
    records: Sequence[VideoRecord],
    criteria: FilterCriteria,
    sort_spec: Optional[SortSpec] = None,
    category_field: CategoryField = CategoryField.HASH_TAGS,
    metric: Metric = Metric.VIEWS,
    top_n: int = DEFAULT_TOP_N,
) -> DashboardView:
    """
    (원본 레코드, 필터, 정렬, 선택 카테고리, 선택 지표) -> (테이블 뷰, 차트 투영) 순수 함수.
    분석은 필터/정렬이 적용된 테이블 결과를 대상으로 한다.
    """
    table = build_table_view(records, criteria, sort_spec)
    projections = build_projections(table.items, top_n=top_n)
    return DashboardView(table=table, projections=projections, category_field=category_field, metric=metric)
