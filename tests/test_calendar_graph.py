import datetime

import pytest

from contestlib.calendar_graph import CalendarGraph, GregorianCalendar


@pytest.fixture(scope="module")
def cal():
    return GregorianCalendar()


def decimal_graph():
    return CalendarGraph([[(1, 10)], [(2, 10)], []])


def mixed_graph():
    return CalendarGraph([[(1, 2), (2, 1)], [(3, 3)], [(3, 5)], []])


def test_decimal_graph_digits():
    graph = decimal_graph()
    assert graph.get_num([3, 7]) == 37
    assert graph.get_path(37) == [3, 7]
    assert graph.total == 100


def test_mixed_graph_is_bijection():
    graph = mixed_graph()
    assert graph.total == 11
    paths = [graph.get_path(n) for n in range(graph.total)]
    assert [graph.get_num(p) for p in paths] == list(range(graph.total))
    assert len({tuple(p) for p in paths}) == graph.total


def test_mixed_graph_paths_are_ordered():
    graph = mixed_graph()
    paths = [graph.get_path(n) for n in range(graph.total)]
    assert paths == sorted(paths)


def test_get_num_rejects_bad_digit():
    graph = mixed_graph()
    with pytest.raises(ValueError):
        graph.get_num([3])
    with pytest.raises(ValueError):
        graph.get_num([-1])


def test_get_num_rejects_too_many_digits():
    with pytest.raises(ValueError):
        decimal_graph().get_num([1, 2, 3])


def test_get_path_rejects_out_of_range():
    graph = mixed_graph()
    with pytest.raises(ValueError):
        graph.get_path(11)
    with pytest.raises(ValueError):
        graph.get_path(-1)


@pytest.mark.parametrize(
    "date",
    [
        datetime.date(1, 1, 1),
        datetime.date(1600, 2, 29),
        datetime.date(1900, 3, 1),
        datetime.date(2000, 2, 29),
        datetime.date(2023, 12, 31),
        datetime.date(9999, 12, 31),
    ],
)
def test_date_to_days_matches_ordinal(cal, date):
    assert cal.date_to_days(date.year, date.month, date.day) == date.toordinal() - 1


def test_days_to_date_matches_datetime(cal):
    for num in range(0, 3_652_000, 9_973):
        expected = datetime.date.fromordinal(num + 1)
        assert cal.days_to_date(num) == (expected.year, expected.month, expected.day)


def test_day_of_the_week(cal):
    assert cal.day_of_the_week(2000, 1, 1) == "Saturday"
    date = datetime.date(2024, 7, 4)
    assert cal.day_of_the_week(2024, 7, 4) == GregorianCalendar.DAY_NAMES[date.weekday()]


@pytest.mark.parametrize(
    "date",
    [datetime.date(2020, 2, 28), datetime.date(1900, 2, 28), datetime.date(1999, 12, 31)],
)
def test_next_day(cal, date):
    following = date + datetime.timedelta(days=1)
    assert cal.next_day(date.year, date.month, date.day) == (
        following.year,
        following.month,
        following.day,
    )


def test_year_ten_thousand_is_last(cal):
    last = cal.date_to_days(10000, 12, 31)
    assert last == cal.graph.total - 1
    assert cal.days_to_date(last) == (10000, 12, 31)
    with pytest.raises(ValueError):
        cal.date_to_days(10001, 1, 1)


@pytest.mark.parametrize("date", [(2021, 2, 29), (1, 13, 1), (1, 0, 1), (0, 1, 1), (2020, 4, 31)])
def test_invalid_dates_raise(cal, date):
    with pytest.raises(ValueError):
        cal.date_to_days(*date)