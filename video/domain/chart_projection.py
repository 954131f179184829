from dataclasses import dataclass

from video.domain.video_field import CategoryField, Metric


@dataclass(frozen=True)
class ChartProjection:
    category_field: CategoryField
    metric: Metric
    labels: tuple[str, ...]
    values: tuple[float, ...]
    border_width: int = 1

    @property
    def label(self) -> str:
        return self.metric.label

    @property
    def background_color(self) -> str:
        return self.metric.color

    @property
    def border_color(self) -> str:
        return self.metric.border_color

    def to_chart_data(self) -> dict:
        # 막대 차트 렌더링용 구조 (labels + datasets)
        return {
            "labels": list(self.labels),
            "datasets": [
                {
                    "label": self.label,
                    "data": list(self.values),
                    "backgroundColor": self.background_color,
                    "borderColor": self.border_color,
                    "borderWidth": self.border_width,
                }
            ],
        }
