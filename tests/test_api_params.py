"""
Tests for mapping parsed queries to backend params.

These tests validate:
- The per-field mapping table (level/status, trigger, workflow, folder, ids)
- Named date ranges rendered as UTC ISO strings
- Synthetic comparison flags for cost and duration
- Free text folding into the search param
"""

import time
from datetime import datetime, timedelta, timezone

import pytest

from logquery.engine.core import parse_query, query_to_api_params
from logquery.engine.core.dates import named_date_range, to_iso
from logquery.models import ParsedFilter, ParsedQuery


def params_for(query: str, now=None) -> dict[str, str]:
    return query_to_api_params(parse_query(query), now=now)


class TestFieldMapping:
    """Equality filters mapped to named params."""

    def test_level(self):
        assert params_for("level:error") == {"level": "error"}

    def test_status_maps_to_level(self):
        assert params_for("status:info") == {"level": "info"}

    def test_non_equality_level_ignored(self):
        assert params_for("level:!=error") == {}

    def test_triggers_accumulate(self):
        assert params_for("trigger:api trigger:webhook") == {"triggers": "api,webhook"}

    def test_workflow_and_folder(self):
        params = params_for('workflow:"Daily report" folder:Ops')
        assert params == {"workflowName": "Daily report", "folderName": "Ops"}

    def test_id_pass_through(self):
        params = params_for("workflowId:wf_1 executionId:ex_9")
        assert params == {"workflowId": "wf_1", "executionId": "ex_9"}


class TestComparisonFlags:
    """cost and duration become synthetic flag keys."""

    def test_cost_flag(self):
        assert params_for("cost:>0.01") == {"cost_>_0.01": "true"}

    def test_cost_equality_flag(self):
        assert params_for("cost:=0") == {"cost_=_0": "true"}

    def test_duration_flag_in_milliseconds(self):
        assert params_for("duration:>5s") == {"duration_>_5000": "true"}


class TestSearchParam:
    """Free text and execution ids."""

    def test_text_search(self):
        assert params_for("refund issue") == {"search": "refund issue"}

    def test_execution_then_text(self):
        assert params_for("execution:abc123 timeout") == {"search": "abc123 timeout"}

    def test_empty_query(self):
        assert params_for("") == {}


class TestDateRanges:
    """Named date ranges relative to a fixed reference time."""

    def test_today_start_only(self, fixed_now):
        parsed = ParsedQuery(
            filters=[ParsedFilter(field="date", operator="=", value="today", original_value="today")],
            text_search="",
        )
        midnight = datetime(2026, 10, 14).astimezone()
        assert query_to_api_params(parsed, now=fixed_now) == {"startDate": to_iso(midnight)}

    def test_yesterday_bounds(self, fixed_now):
        params = params_for("date:yesterday", now=fixed_now)
        start = datetime(2026, 10, 13).astimezone()
        end = datetime(2026, 10, 13, 23, 59, 59, 999000).astimezone()
        assert params == {"startDate": to_iso(start), "endDate": to_iso(end)}

    def test_this_week_starts_monday(self, fixed_now):
        start, end = named_date_range("this-week", fixed_now)
        assert start == datetime(2026, 10, 12).astimezone()
        assert end is None

    def test_last_week(self, fixed_now):
        start, end = named_date_range("last-week", fixed_now)
        assert start == datetime(2026, 10, 5).astimezone()
        assert end == datetime(2026, 10, 11, 23, 59, 59, 999000).astimezone()
        assert end - start < timedelta(days=7, hours=1)

    def test_this_month(self, fixed_now):
        params = params_for("date:this-month", now=fixed_now)
        assert params == {"startDate": to_iso(datetime(2026, 10, 1).astimezone())}

    def test_naive_now_is_local_time(self, fixed_now):
        naive = fixed_now.replace(tzinfo=None)
        assert params_for("date:yesterday", now=naive) == params_for("date:yesterday", now=fixed_now)

    def test_unknown_range_ignored(self, fixed_now):
        assert params_for("date:tomorrow", now=fixed_now) == {}

    def test_iso_format(self, fixed_now):
        rendered = to_iso(fixed_now)
        assert rendered.endswith("Z")
        assert rendered[-5:-1] == ".345"


@pytest.fixture
def new_york_tz(monkeypatch):
    """Run the test with the process local timezone set to America/New_York."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    with monkeypatch.context() as m:
        m.setenv("TZ", "America/New_York")
        time.tzset()
        yield
    time.tzset()


@pytest.mark.usefixtures("new_york_tz")
class TestDaylightSavingRanges:
    """Range boundaries stay on local midnight when the UTC offset changes.

    In 2026 New York springs forward on March 8 and falls back on November 1.
    """

    def test_today_on_spring_forward_day(self):
        # Midnight is still EST, the afternoon is EDT
        assert params_for("date:today", now=datetime(2026, 3, 8, 15, 0)) == {
            "startDate": "2026-03-08T05:00:00.000Z"
        }

    def test_yesterday_spanning_spring_forward(self):
        assert params_for("date:yesterday", now=datetime(2026, 3, 9, 12, 0)) == {
            "startDate": "2026-03-08T05:00:00.000Z",
            "endDate": "2026-03-09T03:59:59.999Z",
        }

    def test_this_week_after_spring_forward(self):
        assert params_for("date:this-week", now=datetime(2026, 3, 10, 9, 0)) == {
            "startDate": "2026-03-09T04:00:00.000Z"
        }

    def test_last_week_spanning_spring_forward(self):
        assert params_for("date:last-week", now=datetime(2026, 3, 10, 9, 0)) == {
            "startDate": "2026-03-02T05:00:00.000Z",
            "endDate": "2026-03-09T03:59:59.999Z",
        }

    def test_yesterday_spanning_fall_back(self):
        assert params_for("date:yesterday", now=datetime(2026, 11, 2, 8, 0)) == {
            "startDate": "2026-11-01T04:00:00.000Z",
            "endDate": "2026-11-02T04:59:59.999Z",
        }

    def test_aware_now_uses_local_calendar_day(self):
        # 03:30 UTC on March 9 is still March 8 in New York
        now = datetime(2026, 3, 9, 3, 30, tzinfo=timezone.utc)
        assert params_for("date:today", now=now) == {"startDate": "2026-03-08T05:00:00.000Z"}
