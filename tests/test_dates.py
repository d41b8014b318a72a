import pytest

from eventcal.dates import Date, Month, MONTH_NAMES


SAMPLES = [
    Date(1, 1, 1970),
    Date(12, 1, 2025),
    Date(28, 2, 2024),
    Date(29, 2, 2024),
    Date(31, 12, 2025),
    Date(30, 4, 2030),
    Date(1, 3, 2025),
]


def test_default_is_epoch():
    assert Date() == Date(1, Month.JAN, 1970)


def test_zero_parts_take_defaults():
    date = Date(0, 0, 2025)
    assert (date.day, date.month, date.year) == (1, 1, 2025)


def test_accessors():
    date = Date(15, Month.JUN, 2026)
    assert (date.day, date.month, date.year) == (15, 6, 2026)


def test_str():
    assert str(Date(12, 1, 2025)) == "12 Jan 2025"


def test_month_name_follows_table():
    for month in Month:
        assert Date(1, month, 2025).month_name == MONTH_NAMES[month - 1]


def test_invalid_month():
    with pytest.raises(ValueError, match="Invalid month"):
        Date(1, 13, 2025)


def test_invalid_day():
    with pytest.raises(ValueError, match="Invalid day for the month"):
        Date(30, 2, 2024)
    with pytest.raises(ValueError):
        Date(31, Month.APR, 2025)


def test_year_before_epoch():
    with pytest.raises(ValueError):
        Date(1, 1, 1969)


def test_number_of_days():
    assert Date.number_of_days(Month.APR, 2025) == 30
    assert Date.number_of_days(Month.JAN, 2025) == 31
    assert Date.number_of_days(Month.FEB, 2023) == 28
    assert Date.number_of_days(Month.FEB, 2024) == Date.number_of_days(Month.FEB, 2023) + 1


def test_number_of_days_invalid_month():
    with pytest.raises(ValueError, match="Invalid month"):
        Date.number_of_days(13, 2025)


def test_leap_year_rule_is_every_fourth_year():
    assert Date.is_leap_year(2024)
    assert not Date.is_leap_year(2025)
    assert Date.is_leap_year(2100)
    assert Date(1, 1, 2024).leap_year


def test_days_in_month_matches_static():
    for date in SAMPLES:
        assert date.days_in_month == Date.number_of_days(date.month, date.year)


def test_day_of_week_epoch_is_thursday():
    assert Date.day_of_week(1, 1, 1970) == 4


def test_day_of_week_advances_by_one():
    for day in range(1, 30):
        first = Date.day_of_week(day, 3, 2025)
        second = Date.day_of_week(day + 1, 3, 2025)
        assert second == (first + 1) % 7


def test_to_days_epoch_is_zero():
    assert Date(1, 1, 1970).to_days() == 0


def test_subtracting_own_day_count_gives_epoch():
    for date in SAMPLES:
        assert date - date.to_days() == Date()


def test_subtracting_past_epoch_raises():
    with pytest.raises(ValueError, match="Invalid date"):
        Date(1, 1, 1970) - 1


def test_add_zero_is_identity():
    for date in SAMPLES:
        assert date + 0 == date


def test_add_month_length_moves_to_next_month():
    date = Date(1, Month.JAN, 2025)
    assert date + Date.number_of_days(Month.JAN, 2025) == Date(1, Month.FEB, 2025)


def test_add_increases_date():
    for date in SAMPLES:
        assert date + 40 > date


def test_add_negative_rejected():
    with pytest.raises(ValueError):
        Date(5, 5, 2025) + -1


def test_next_day_crosses_month():
    assert Date(31, 1, 2025).next_day() == Date(1, Month.FEB, 2025)


def test_next_and_previous_round_trip():
    for date in SAMPLES:
        assert date.next_day().previous_day() == date
        if date != Date():
            assert date.previous_day().next_day() == date


def test_previous_day_crosses_year():
    prev = Date(1, 1, 2025).previous_day()
    assert prev.month == Month.DEC
    assert prev.day == prev.days_in_month
    assert prev.year == 2025 - 1


def test_previous_day_crosses_month():
    prev = Date(1, Month.MAR, 2024).previous_day()
    assert prev.month == Month.FEB
    assert prev.day == Date.number_of_days(Month.FEB, 2024)


def test_previous_day_of_epoch_raises():
    with pytest.raises(ValueError):
        Date().previous_day()


def test_with_month_overflow_rolls_year():
    assert Date(15, 6, 2025).with_month(13) == Date(15, 1, 2026)


def test_with_day_zero_rejected():
    with pytest.raises(ValueError, match="Invalid date"):
        Date(5, 5, 2025).with_day(0)


def test_with_year_keeps_day_and_month():
    date = Date(9, Month.MAY, 2025).with_year(2027)
    assert (date.day, date.month, date.year) == (9, 5, 2027)


def test_ordering():
    assert Date(28, 1, 2025) < Date(1, 2, 2025)
    assert Date(1, 2, 2025) > Date(28, 1, 2025)
    assert Date(31, 12, 2024) < Date(1, 1, 2025)
    assert Date(1, 1, 2025) <= Date(1, 1, 2025)
    assert Date(1, 1, 2025) >= Date(1, 1, 2025)
    assert sorted(SAMPLES) == sorted(SAMPLES, key=lambda d: (d.year, d.month, d.day))


def test_equality_and_hash():
    assert Date(12, 1, 2025) == Date(12, Month.JAN, 2025)
    assert len({Date(12, 1, 2025), Date(12, Month.JAN, 2025)}) == 1
    assert Date(12, 1, 2025) != Date(13, 1, 2025)