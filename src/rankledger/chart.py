"""Chart data export.

Projects a ledger onto a unit square so a front-end can draw one line per
series without knowing anything about dates or score ranges. Every
coordinate and tick position is in ``[0, 1]``.
"""

from __future__ import annotations

import logging
import math
from datetime import UTC, date, datetime, time
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from rankledger import _constants
from rankledger.exceptions import RankLedgerPersistenceError
from rankledger.models import EntitySeries, HistorySeries, Ledger

_logger = logging.getLogger(__name__)


class ChartPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float
    y: float


class AxisTick(BaseModel):
    model_config = ConfigDict(frozen=True)

    position: float
    text: str


class ChartDataSet(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    points: list[ChartPoint] = Field(default_factory=list)


class ChartInfo(BaseModel):
    """Renderer-ready chart description."""

    model_config = ConfigDict(frozen=True)

    name: str
    x_axis: list[AxisTick] = Field(default_factory=list)
    y_axis: list[AxisTick] = Field(default_factory=list)
    max_data_sets: int = _constants.CHART_MAX_SERIES
    data_sets: list[ChartDataSet] = Field(default_factory=list)


def chart_day(day: date) -> datetime:
    """Moment at which a snapshot day is plotted."""
    return datetime.combine(day, time.min, tzinfo=UTC)


def _series_points(series: EntitySeries) -> list[tuple[datetime, float]]:
    if isinstance(series, HistorySeries):
        return [(point.date, point.score) for point in series.points]
    return [(chart_day(day), score) for day, score in series.points.items()]


def _month_start(moment: datetime) -> datetime:
    utc = moment.astimezone(UTC)
    return datetime(utc.year, utc.month, 1, tzinfo=UTC)


def _next_month(moment: datetime) -> datetime:
    if moment.month == 12:
        return moment.replace(year=moment.year + 1, month=1)
    return moment.replace(month=moment.month + 1)


def _fraction(value: float, low: float, high: float) -> float:
    if high <= low:
        return 0.0
    return min(1.0, max(0.0, (value - low) / (high - low)))


def _score_floor(lowest: float) -> float:
    step = _constants.CHART_SCORE_STEP
    floor = math.floor(lowest / step) * step
    # Keep a visible band when every score sits on the ceiling.
    return min(floor, _constants.CHART_SCORE_CEILING - step)


def _format_score(value: float) -> str:
    return f"{value:g}"


def build_chart(
    ledger: Ledger,
    now: datetime,
    *,
    title: str = _constants.CHART_TITLE,
    max_data_sets: int = _constants.CHART_MAX_SERIES,
) -> ChartInfo:
    """Build chart data for *ledger* as of *now*.

    The x span runs from the first day of the oldest point's month to
    *now*, with one tick per month. The y span runs from the lowest score
    (rounded down to a quarter point) to 10, with five ticks.
    """
    collected = [(series.name, _series_points(series)) for series in ledger.series]
    every_point = [point for _, points in collected for point in points]
    if not every_point:
        return ChartInfo(name=title, max_data_sets=max_data_sets)

    start = _month_start(min(moment for moment, _ in every_point))
    end = max(now.astimezone(UTC), max(moment for moment, _ in every_point))
    span_start = start.timestamp()
    span_end = end.timestamp()

    low = _score_floor(min(score for _, score in every_point))
    high = _constants.CHART_SCORE_CEILING

    data_sets = [
        ChartDataSet(
            name=name,
            points=[
                ChartPoint(x=_fraction(moment.timestamp(), span_start, span_end), y=_fraction(score, low, high))
                for moment, score in points
            ],
        )
        for name, points in collected
    ]

    x_axis: list[AxisTick] = []
    tick = start
    while tick <= end:
        x_axis.append(AxisTick(position=_fraction(tick.timestamp(), span_start, span_end), text=tick.strftime("%b %Y")))
        tick = _next_month(tick)

    y_axis = [
        AxisTick(position=step / 4, text=_format_score(low + (high - low) * step / 4))
        for step in range(5)
    ]

    return ChartInfo(name=title, x_axis=x_axis, y_axis=y_axis, max_data_sets=max_data_sets, data_sets=data_sets)


def write_chart(path: Path | str, chart: ChartInfo) -> None:
    """Write *chart* as indented JSON."""
    file_path = Path(path)
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(chart.model_dump_json(indent=2), encoding="utf-8")
    except OSError as exc:
        raise RankLedgerPersistenceError(f"Cannot write chart {file_path}: {exc}", path=file_path) from exc
    _logger.info("Wrote chart with %d data sets to %s", len(chart.data_sets), file_path)
