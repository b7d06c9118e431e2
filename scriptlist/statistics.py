"""Charts and overviews built from per-day script statistics."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from datetime import datetime, timedelta

logger = logging.getLogger(__name__)

DAY = timedelta(hours=24)
DATE_FORMAT = "%Y/%m/%d"


@dataclass
class Chart:
    x: list[str] = field(default_factory=list)
    y: list[int] = field(default_factory=list)


@dataclass
class Overview:
    today: int
    yesterday: int
    week: int


def days_chart(days: int, date: datetime, counter: Callable[[datetime], int]) -> Chart:
    """Chart one value per day for the `days` days ending at `date`.

    A counter that fails for a day contributes zero for that day.
    """
    chart = Chart()
    moment = date - DAY * days
    for _ in range(days):
        moment += DAY
        try:
            num = counter(moment)
        except Exception:
            logger.exception("daily statistics failed for %s", moment)
            num = 0
        chart.x.append(moment.strftime(DATE_FORMAT))
        chart.y.append(num)
    return chart


def realtime_chart(nums: Iterable[int]) -> Chart:
    """Chart per-minute counts given newest first, laid out oldest first."""
    values = list(nums)
    count = len(values)
    return Chart(
        x=[f"{count - i}分钟前" for i in range(count)],
        y=values[::-1],
    )


def _count_ignoring_error(counter: Callable[[int, datetime], int], days: int, when: datetime) -> int:
    try:
        return counter(days, when)
    except Exception:
        logger.exception("statistics failed: days=%s t=%s", days, when)
        return 0


def overview(counter: Callable[[int, datetime], int], now: datetime) -> Overview:
    """Today, yesterday and last-seven-days counts; failures count as zero."""
    return Overview(
        today=_count_ignoring_error(counter, 1, now),
        yesterday=_count_ignoring_error(counter, 1, now - timedelta(days=1)),
        week=_count_ignoring_error(counter, 7, now),
    )