from datetime import datetime

from pastdate.models.conversion import DateConversion


class TestDateConversion:
    def test_iso_date(self):
        conversion = DateConversion(text="Aug 20, 2013", resolved=datetime(2013, 8, 20))
        assert conversion.iso_date == "2013-08-20"

    def test_days_since_epoch(self):
        assert DateConversion(text="x", resolved=datetime(1970, 1, 1)).days_since_epoch == 0
        assert DateConversion(text="x", resolved=datetime(1970, 1, 2)).days_since_epoch == 1
        assert DateConversion(text="x", resolved=datetime(1969, 12, 31)).days_since_epoch == -1

    def test_computed_fields_serialised(self):
        dumped = DateConversion(text="today", resolved=datetime(2026, 2, 11)).model_dump()
        assert dumped["iso_date"] == "2026-02-11"
        assert dumped["days_since_epoch"] == 20495
        assert dumped["text"] == "today"
