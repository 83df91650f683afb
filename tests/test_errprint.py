import pytest

from minishexec.errprint import eprintf, format_message


def test_plain_text_unchanged():
    assert format_message("exit\n") == "exit\n"


def test_string_conversion():
    msg = format_message("%s: command not found\n", "foo")
    assert msg == "foo: command not found\n"


def test_null_string():
    assert format_message("%s", None) == "(null)"


def test_null_pointer():
    assert format_message("%p", 0) == "(nil)"


def test_pointer_round_trip():
    text = format_message("%p", 48879)
    assert text.startswith("0x")
    assert int(text, 16) == 48879


@pytest.mark.parametrize("spec", ["d", "i"])
def test_signed_round_trip(spec):
    for value in (0, 7, -13, 2147483647):
        assert int(format_message("%" + spec, value)) == value


def test_int_min():
    assert format_message("%d", -2147483648) == "-2147483648"


def test_signed_wraps_to_32_bits():
    assert format_message("%d", 2**31) == "-2147483648"


def test_unsigned_of_negative_wraps():
    assert int(format_message("%u", -1)) == 2**32 - 1


def test_hex_round_trip_and_case():
    lower = format_message("%x", 48879)
    upper = format_message("%X", 48879)
    assert int(lower, 16) == 48879
    assert lower.islower()
    assert upper == lower.upper()


def test_char_conversion():
    assert format_message("[%c]", ord("z")) == "[z]"
    assert format_message("%c", "q") == "q"


def test_percent_escape():
    assert format_message("100%%") == "100%"


def test_unknown_conversion_kept():
    assert format_message("%q") == "%q"


def test_trailing_percent_is_error():
    with pytest.raises(ValueError):
        format_message("oops %")


def test_missing_argument_is_error():
    with pytest.raises(ValueError):
        format_message("%s %s", "only")


def test_eprintf_writes_to_stderr(capsys):
    length = eprintf("minishell: %s: Permission denied\n", "prog")
    captured = capsys.readouterr()
    assert captured.err == "minishell: prog: Permission denied\n"
    assert captured.out == ""
    assert length == len(captured.err)


def test_eprintf_error_writes_nothing(capsys):
    with pytest.raises(ValueError):
        eprintf("bad %")
    assert capsys.readouterr().err == ""