from bitproto.errors import ParseError


def test_keeps_offending_value():
    error = ParseError("bogus")
    assert error.value == "bogus"


def test_message_mentions_value():
    assert "bogus" in str(ParseError("bogus"))


def test_is_value_error_carrying_value():
    error = ParseError("abc")
    assert isinstance(error, ValueError)
    assert error.value == "abc"