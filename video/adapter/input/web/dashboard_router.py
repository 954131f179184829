import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from video.adapter.input.web.request.dashboard_requests import (
    category_fields_param,
    filter_params,
    metrics_param,
    sort_params,
)
from video.application.pipeline.ranking import Projections
from video.application.usecase.dashboard_query_usecase import DashboardQueryUseCase
from video.domain.errors import UnknownFieldError
from video.domain.filter_criteria import FilterCriteria
from video.domain.sort_spec import SortSpec
from video.domain.video_field import CategoryField, Metric
from video.infrastructure.repository.video_repository_impl import VideoRepositoryImpl

logger = logging.getLogger(__name__)

dashboard_router = APIRouter(tags=["dashboard"])

_usecase: DashboardQueryUseCase | None = None


def get_dashboard_usecase() -> DashboardQueryUseCase:
    """최초 요청 시 리포지토리/유스케이스를 만들어 재사용한다."""
    global _usecase
    if _usecase is None:
        _usecase = DashboardQueryUseCase(VideoRepositoryImpl())
    return _usecase


def _charts_to_dict(projections: Projections) -> dict:
    return {
        field.value: {metric.value: chart.to_chart_data() for metric, chart in charts.items()}
        for field, charts in projections.items()
    }


@dashboard_router.get("/data")
def get_data(usecase: DashboardQueryUseCase = Depends(get_dashboard_usecase)):
    """
    videos 테이블 전체를 그대로 반환한다.
    """
    try:
        videos = usecase.list_videos()
    except SQLAlchemyError as exc:
        logger.exception("failed to load videos: %s", exc)
        raise HTTPException(status_code=500, detail="Server Error") from exc
    return JSONResponse(jsonable_encoder([v.to_dict() for v in videos]))


@dashboard_router.get("/table")
def get_table(
    criteria: FilterCriteria = Depends(filter_params),
    sort_spec: SortSpec | None = Depends(sort_params),
    usecase: DashboardQueryUseCase = Depends(get_dashboard_usecase),
):
    """
    필터 + 정렬이 적용된 콘텐츠 테이블을 조회한다.
    """
    try:
        table = usecase.get_table(criteria, sort_spec)
    except SQLAlchemyError as exc:
        logger.exception("failed to build table view: %s", exc)
        raise HTTPException(status_code=500, detail="Server Error") from exc
    return JSONResponse(jsonable_encoder(table.to_dict()))


@dashboard_router.get("/analysis")
def get_analysis(
    criteria: FilterCriteria = Depends(filter_params),
    sort_spec: SortSpec | None = Depends(sort_params),
    fields: list[CategoryField] | None = Depends(category_fields_param),
    metrics: list[Metric] | None = Depends(metrics_param),
    top_n: int | None = Query(default=None, ge=1, le=100),
    usecase: DashboardQueryUseCase = Depends(get_dashboard_usecase),
):
    """
    해시태그/토픽/태그별 조회수·빈도·효율(조회수/빈도) 상위 N 차트 데이터를 조회한다.
    """
    try:
        table, projections = usecase.get_analysis(criteria, sort_spec, fields=fields, metrics=metrics, top_n=top_n)
    except SQLAlchemyError as exc:
        logger.exception("failed to build analysis: %s", exc)
        raise HTTPException(status_code=500, detail="Server Error") from exc
    return JSONResponse(
        jsonable_encoder(
            {
                "filtered": table.filtered,
                "top_n": top_n or usecase.settings.top_n,
                "charts": _charts_to_dict(projections),
            }
        )
    )


@dashboard_router.get("/dashboard")
def get_dashboard(
    field: str = Query(default="hashtags", description="선택 탭: hashtags | topics | tags"),
    metric: str = Query(default="views", description="선택 지표: views | frequency | effectiveness"),
    top_n: int | None = Query(default=None, ge=1, le=100),
    criteria: FilterCriteria = Depends(filter_params),
    sort_spec: SortSpec | None = Depends(sort_params),
    usecase: DashboardQueryUseCase = Depends(get_dashboard_usecase),
):
    """
    테이블 뷰와 선택된 탭/지표의 차트, 그리고 전체 9개 차트를 한 번에 조회한다.
    """
    try:
        category_field = CategoryField.parse(field)
        selected_metric = Metric.parse(metric)
    except UnknownFieldError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    try:
        view = usecase.get_dashboard(
            criteria, sort_spec, category_field=category_field, metric=selected_metric, top_n=top_n
        )
    except SQLAlchemyError as exc:
        logger.exception("failed to build dashboard: %s", exc)
        raise HTTPException(status_code=500, detail="Server Error") from exc

    return JSONResponse(
        jsonable_encoder(
            {
                "table": view.table.to_dict(),
                "selected": {
                    "field": view.category_field.value,
                    "metric": view.metric.value,
                    "chart": view.selected.to_chart_data(),
                },
                "charts": _charts_to_dict(view.projections),
            }
        )
    )
