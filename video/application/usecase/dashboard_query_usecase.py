from typing import Iterable, Optional

from config.settings import DashboardSettings
from video.application.pipeline.dashboard_pipeline import (
    DashboardView,
    TableView,
    build_projections,
    build_table_view,
    run_pipeline,
)
from video.application.pipeline.ranking import Projections
from video.application.port.video_repository_port import VideoRepositoryPort
from video.domain.filter_criteria import FilterCriteria
from video.domain.sort_spec import SortSpec
from video.domain.video_field import CategoryField, Metric
from video.domain.video_record import VideoRecord


class DashboardQueryUseCase:
    def __init__(self, repository: VideoRepositoryPort, settings: DashboardSettings | None = None):
        # 콘텐츠 테이블/분석 화면에서 필요한 조회를 담당한다. 매 호출마다 원본을 한 번 읽는다.
        self.repository = repository
        self.settings = settings or DashboardSettings()

    def list_videos(self) -> list[VideoRecord]:
        return self.repository.fetch_all()

    def get_table(self, criteria: FilterCriteria, sort_spec: Optional[SortSpec] = None) -> TableView:
        return build_table_view(self.repository.fetch_all(), criteria, sort_spec)

    def get_analysis(
        self,
        criteria: FilterCriteria,
        sort_spec: Optional[SortSpec] = None,
        fields: Optional[Iterable[CategoryField]] = None,
        metrics: Optional[Iterable[Metric]] = None,
        top_n: int | None = None,
    ) -> tuple[TableView, Projections]:
        """
        필터/정렬된 테이블 결과를 기준으로 카테고리별 차트 데이터를 만든다.
        fields / metrics 를 생략하면 전체(3 x 3)를 계산한다.
        """
        table = self.get_table(criteria, sort_spec)
        projections = build_projections(table.items, top_n=top_n or self.settings.top_n, fields=fields, metrics=metrics)
        return table, projections

    def get_dashboard(
        self,
        criteria: FilterCriteria,
        sort_spec: Optional[SortSpec] = None,
        category_field: CategoryField = CategoryField.HASH_TAGS,
        metric: Metric = Metric.VIEWS,
        top_n: int | None = None,
    ) -> DashboardView:
        return run_pipeline(
            self.repository.fetch_all(),
            criteria,
            sort_spec=sort_spec,
            category_field=category_field,
            metric=metric,
            top_n=top_n or self.settings.top_n,
        )
