from pastdate.models.enums import IntervalUnit, Month, MonthFormat


class TestMonth:
    def test_member_count(self):
        assert len(Month) == 12

    def test_is_int_enum(self):
        assert isinstance(Month.AUGUST, int)
        assert Month.AUGUST == 8

    def test_calendar_numbering(self):
        assert Month.JANUARY.value == 1
        assert Month.DECEMBER.value == 12

    def test_construction_from_value(self):
        assert Month(2) is Month.FEBRUARY


class TestIntervalUnit:
    def test_members(self):
        assert [unit.value for unit in IntervalUnit] == ["day", "week", "month", "year"]

    def test_is_str_enum(self):
        assert isinstance(IntervalUnit.WEEK, str)
        assert IntervalUnit.WEEK == "week"

    def test_construction_from_value(self):
        assert IntervalUnit("month") is IntervalUnit.MONTH


class TestMonthFormat:
    def test_values(self):
        assert MonthFormat.NAME.value == "MMM"
        assert MonthFormat.NUMBER.value == "M"
