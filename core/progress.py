from collections import defaultdict
from datetime import date, datetime
from io import BytesIO
from typing import Any, Iterable

from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure
from matplotlib.ticker import FuncFormatter

from config.app_settings import settings
from core.exceptions import NoProgressDataError
from core.program.progression_rules import round_half_up
from core.schemas import PersonalRecord, ProgressPoint

CHART_BACKGROUND = "#0F172A"
CHART_GRID = "#1F2937"
CHART_AXIS = "#6B7280"
CHART_LINE = "#3B82F6"


def _log_date(value: Any) -> date | None:
    if not value:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00")).date()
    except ValueError:
        return None


def _number(value: Any) -> float:
    try:
        return float(value or 0)
    except (TypeError, ValueError):
        return 0.0


def volume_by_date(rows: Iterable[dict[str, Any]]) -> list[ProgressPoint]:
    """Sum weight times reps per calendar day of the parent workout's completion."""
    totals: dict[date, float] = defaultdict(float)
    for row in rows:
        day = _log_date(row.get("completed_at"))
        weight = _number(row.get("weight"))
        reps = _number(row.get("reps"))
        if day is None or not weight or not reps:
            continue
        totals[day] += weight * reps

    return [ProgressPoint(date=day.isoformat(), volume=round_half_up(totals[day])) for day in sorted(totals)]


def _format_thousands(value: float, _position: int) -> str:
    return f"{value / 1000:.1f}k"


def _short_label(iso_date: str) -> str:
    parsed = date.fromisoformat(iso_date)
    return f"{parsed:%b} {parsed.day}"


def render_progress_chart(points: list[ProgressPoint], user_id: str = "") -> bytes:
    if not points:
        raise NoProgressDataError(user_id)

    labels = [_short_label(point.date) for point in points]
    volumes = [point.volume for point in points]
    positions = list(range(len(points)))

    figure = Figure(figsize=(8, 3.2), dpi=100, facecolor=CHART_BACKGROUND)
    FigureCanvasAgg(figure)
    axes = figure.add_subplot(1, 1, 1)
    axes.set_facecolor(CHART_BACKGROUND)

    axes.plot(positions, volumes, color=CHART_LINE, linewidth=3)
    axes.fill_between(positions, volumes, color=CHART_LINE, alpha=0.35)
    axes.set_title("Volume Progression", color="white", loc="left", fontweight="bold")
    axes.set_ylabel(f"Total Volume Load ({settings.WEIGHT_UNIT})", color=CHART_AXIS, fontsize=9)
    axes.set_xticks(positions)
    axes.set_xticklabels(labels)
    axes.yaxis.set_major_formatter(FuncFormatter(_format_thousands))
    axes.tick_params(colors=CHART_AXIS, labelsize=9, length=0)
    axes.grid(axis="y", color=CHART_GRID, linestyle="--")
    for spine in axes.spines.values():
        spine.set_visible(False)
    axes.set_ylim(bottom=0)

    figure.tight_layout()
    buffer = BytesIO()
    figure.savefig(buffer, format="png", facecolor=figure.get_facecolor())
    return buffer.getvalue()


def personal_record_summary(records: Iterable[PersonalRecord]) -> list[PersonalRecord]:
    return sorted(records, key=lambda record: (record.exercise_name.lower(), record.exercise_id))
