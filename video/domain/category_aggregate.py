from dataclasses import dataclass


@dataclass
class CategoryAggregate:
    # 카테고리(해시태그/토픽/태그) 하나에 대한 누적 조회수와 등장 횟수
    label: str
    views: int = 0
    frequency: int = 0

    def add(self, views: int) -> None:
        self.views += views
        self.frequency += 1

    @property
    def effectiveness(self) -> float:
        # 집계 테이블에 존재하는 키는 frequency >= 1 이다.
        return self.views / self.frequency
