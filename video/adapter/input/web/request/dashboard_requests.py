from fastapi import HTTPException, Query

from video.domain.errors import UnknownFieldError
from video.domain.filter_criteria import FilterCriteria
from video.domain.sort_spec import SortSpec
from video.domain.video_field import CategoryField, Metric, VideoField


def filter_params(
    title: str = Query(default="", description="제목 부분 일치"),
    description: str = Query(default="", description="설명 부분 일치"),
    channel: str = Query(default=""),
    topics: str = Query(default=""),
    tags: str = Query(default=""),
    hash_tags: str = Query(default=""),
    start_date: str = Query(default="", alias="startDate", description="YYYY-MM-DD (포함)"),
    end_date: str = Query(default="", alias="endDate", description="YYYY-MM-DD (포함)"),
) -> FilterCriteria:
    return FilterCriteria.from_mapping(
        {
            "title": title,
            "description": description,
            "channel": channel,
            "topics": topics,
            "tags": tags,
            "hash_tags": hash_tags,
            "startDate": start_date,
            "endDate": end_date,
        }
    )


def sort_params(
    sort_key: str | None = Query(default=None, description="정렬 컬럼 (예: views, published_at)"),
    direction: str = Query(default="ascending", description="ascending | descending"),
    toggle: str | None = Query(default=None, description="컬럼 헤더 클릭: 같은 컬럼이면 방향 전환"),
) -> SortSpec | None:
    """
    현재 정렬(sort_key, direction)에 toggle 컬럼 요청을 적용한 최종 정렬 조건을 돌려준다.
    """
    try:
        current = SortSpec.parse(sort_key, direction) if sort_key else None
        if toggle:
            current = SortSpec.request(current, VideoField.parse(toggle))
    except UnknownFieldError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return current


def category_fields_param(
    field: str | None = Query(default=None, description="hashtags | topics | tags (생략 시 전체)"),
) -> list[CategoryField] | None:
    if not field:
        return None
    try:
        return [CategoryField.parse(field)]
    except UnknownFieldError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


def metrics_param(
    metric: str | None = Query(default=None, description="views | frequency | effectiveness (생략 시 전체)"),
) -> list[Metric] | None:
    if not metric:
        return None
    try:
        return [Metric.parse(metric)]
    except UnknownFieldError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
