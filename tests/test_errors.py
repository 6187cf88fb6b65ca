from pastdate.errors import DateParseError, GrammarError, PastDateError


class TestExceptionHierarchy:
    def test_grammar_error_is_pastdate_error(self):
        assert issubclass(GrammarError, PastDateError)

    def test_parse_error_is_value_error(self):
        assert issubclass(DateParseError, PastDateError)
        assert issubclass(DateParseError, ValueError)


class TestDateParseError:
    def test_message(self):
        assert str(DateParseError("soon")) == "Cannot parse date: 'soon'"

    def test_defaults(self):
        error = DateParseError("soon")
        assert error.offset == 0
        assert error.expected == ()

    def test_describe_without_labels(self):
        assert DateParseError("soon", 2).describe() == "Cannot parse date: 'soon' at offset 2"

    def test_describe_with_labels(self):
        error = DateParseError("today x", 6, ("end of input",))
        assert error.describe() == (
            "Cannot parse date: 'today x' at offset 6 (expected end of input)"
        )
