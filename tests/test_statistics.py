from datetime import datetime, timedelta

from scriptlist.statistics import Chart, Overview, days_chart, overview, realtime_chart


def test_days_chart_walks_each_day_up_to_date():
    date = datetime(2024, 3, 3, 12, 0)
    chart = days_chart(3, date, lambda moment: moment.day)
    assert chart.x == ["2024/03/01", "2024/03/02", "2024/03/03"]
    assert chart.y == [1, 2, 3]


def test_days_chart_length_matches_days():
    date = datetime(2024, 1, 31)
    chart = days_chart(30, date, lambda moment: 1)
    assert len(chart.x) == len(chart.y) == 30
    assert chart.x[-1] == date.strftime("%Y/%m/%d")
    assert chart.x == sorted(chart.x)


def test_days_chart_failures_count_as_zero():
    def counter(moment):
        raise RuntimeError("backend down")

    chart = days_chart(2, datetime(2024, 5, 10), counter)
    assert chart.y == [0, 0]
    assert chart.x == ["2024/05/09", "2024/05/10"]


def test_days_chart_zero_days_is_empty():
    assert days_chart(0, datetime(2024, 5, 10), lambda m: 5) == Chart([], [])


def test_realtime_chart_reverses_minutes():
    chart = realtime_chart([5, 6, 7])
    assert chart.x == ["3分钟前", "2分钟前", "1分钟前"]
    assert chart.y == [7, 6, 5]


def test_realtime_chart_empty():
    assert realtime_chart([]) == Chart([], [])


def test_overview_queries_today_yesterday_and_week():
    now = datetime(2024, 3, 10, 8, 30)
    calls = []

    def counter(days, when):
        calls.append((days, when))
        return days * 10 + when.day

    result = overview(counter, now)
    assert calls == [(1, now), (1, now - timedelta(days=1)), (7, now)]
    assert result == Overview(today=1 * 10 + 10, yesterday=1 * 10 + 9, week=7 * 10 + 10)


def test_overview_failures_count_as_zero():
    def counter(days, when):
        if days == 7:
            raise RuntimeError("boom")
        return 3

    assert overview(counter, datetime(2024, 3, 10)) == Overview(today=3, yesterday=3, week=0)