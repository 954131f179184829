class DashboardError(ValueError):
    """대시보드 파이프라인에서 사용하는 도메인 예외의 공통 부모."""


class MissingFieldError(DashboardError):
    # 레코드에 필터/정렬/집계 대상 필드가 없을 때. 파이프라인 내부에서는 기본값으로 정규화된다.
    def __init__(self, field: str):
        super().__init__(f"missing field: {field}")
        self.field = field


class MalformedDateError(DashboardError):
    def __init__(self, value):
        super().__init__(f"malformed date: {value!r}")
        self.value = value


class UnknownFieldError(DashboardError):
    # 지원하지 않는 컬럼/카테고리/지표/정렬 방향 이름. 웹 계층에서 400으로 변환된다.
    def __init__(self, kind: str, name, allowed):
        super().__init__(f"unknown {kind}: {name!r} (allowed: {', '.join(allowed)})")
        self.kind = kind
        self.name = name
