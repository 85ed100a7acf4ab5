"""Dashboard payload models (the fenced JSON block the model returns)."""

from dataclasses import dataclass, field
from typing import Any, Literal

ChartType = Literal["bar", "line", "pie", "funnel"]
InsightType = Literal["critical", "positive", "neutral"]

CHART_TYPES = ("bar", "line", "pie", "funnel")
INSIGHT_TYPES = ("critical", "positive", "neutral")


@dataclass
class Metric:
    """A KPI card."""

    label: str
    value: str | int | float
    change: float | None = None
    is_positive: bool | None = None

    def to_dict(self) -> dict:
        data: dict[str, Any] = {"label": self.label, "value": self.value}
        if self.change is not None:
            data["change"] = self.change
        if self.is_positive is not None:
            data["isPositive"] = self.is_positive
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Metric":
        return cls(
            label=data["label"],
            value=data["value"],
            change=data.get("change"),
            is_positive=data.get("isPositive"),
        )


@dataclass
class Chart:
    """A chart spec; ``data`` rows hold a ``name`` plus the series in ``keys``."""

    type: ChartType
    title: str
    data: list[dict[str, Any]] = field(default_factory=list)
    keys: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "type": self.type,
            "title": self.title,
            "data": [dict(row) for row in self.data],
            "keys": list(self.keys),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Chart":
        return cls(
            type=data["type"],
            title=data["title"],
            data=[dict(row) for row in data["data"]],
            keys=list(data["keys"]),
        )


@dataclass
class Insight:
    type: InsightType
    text: str

    def to_dict(self) -> dict:
        return {"type": self.type, "text": self.text}

    @classmethod
    def from_dict(cls, data: dict) -> "Insight":
        return cls(type=data["type"], text=data["text"])


@dataclass
class StructuredResult:
    """Full dashboard payload. Either entirely valid or not attached at all."""

    summary: str
    metrics: list[Metric] = field(default_factory=list)
    charts: list[Chart] = field(default_factory=list)
    insights: list[Insight] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Serialize to the wire shape (camelCase keys, unset optionals omitted)."""
        return {
            "summary": self.summary,
            "metrics": [m.to_dict() for m in self.metrics],
            "charts": [c.to_dict() for c in self.charts],
            "insights": [i.to_dict() for i in self.insights],
            "recommendations": list(self.recommendations),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "StructuredResult":
        """Build from an already validated mapping (see extraction.schema)."""
        return cls(
            summary=data["summary"],
            metrics=[Metric.from_dict(m) for m in data["metrics"]],
            charts=[Chart.from_dict(c) for c in data["charts"]],
            insights=[Insight.from_dict(i) for i in data["insights"]],
            recommendations=list(data["recommendations"]),
        )
