import datetime as dt

from casedesk.services.statute import parse_date, statute_days_left, statute_deadline


def test_deadline_is_two_calendar_years_later():
    assert statute_deadline(dt.date(2023, 3, 15)) == dt.date(2025, 3, 15)


def test_deadline_accepts_iso_strings():
    assert statute_deadline("2023-03-15") == dt.date(2025, 3, 15)
    assert statute_deadline("2023-03-15T10:30:00Z") == dt.date(2025, 3, 15)


def test_leap_day_rolls_to_feb_28():
    assert statute_deadline(dt.date(2024, 2, 29)) == dt.date(2026, 2, 28)


def test_missing_or_garbage_date_has_no_deadline():
    assert statute_deadline(None) is None
    assert statute_deadline("") is None
    assert statute_deadline("not a date") is None


def test_configurable_years():
    assert statute_deadline(dt.date(2020, 1, 1), years=3) == dt.date(2023, 1, 1)


def test_days_left():
    assert statute_days_left(dt.date(2025, 3, 15), today=dt.date(2025, 3, 5)) == 10
    assert statute_days_left(dt.date(2025, 3, 15), today=dt.date(2025, 3, 20)) == -5
    assert statute_days_left(None) is None


def test_parse_date_passes_dates_through():
    d = dt.date(2024, 5, 1)
    assert parse_date(d) is d
    assert parse_date(dt.datetime(2024, 5, 1, 12, 0)) == d


def test_partial_dates_have_no_deadline():
    assert statute_deadline("March") is None
    assert statute_deadline("2023") is None
    assert statute_deadline("March 2023") is None


def test_complete_written_dates_parse():
    assert statute_deadline("March 15, 2023") == dt.date(2025, 3, 15)
    assert statute_deadline("03/15/2023") == dt.date(2025, 3, 15)
