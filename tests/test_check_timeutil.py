"""
Tests for timezone-aware report stamps.
"""

import datetime

import pytest
import pytz

from check_timeutil import iso_stamp, now_in, zone


class TestTimeutil:

    def test_now_in_is_aware(self):
        assert now_in("Asia/Seoul").utcoffset() == datetime.timedelta(hours=9)

    def test_naive_assumed_utc(self):
        dt = datetime.datetime(2026, 10, 16, 0, 0, 0)
        assert iso_stamp(dt, "Asia/Seoul") == "2026-10-16T09:00:00+09:00"

    def test_aware_converted(self):
        dt = pytz.UTC.localize(datetime.datetime(2026, 1, 1, 12, 30, 15, 999))
        assert iso_stamp(dt, "UTC") == "2026-01-01T12:30:15+00:00"

    def test_unknown_zone(self):
        with pytest.raises(pytz.UnknownTimeZoneError):
            zone("Nowhere/Special")
