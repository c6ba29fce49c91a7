import pytest

from ntlib.printf import printf


def test_plain_text(capsys):
    count = printf("hello")
    assert capsys.readouterr().out == "hello"
    assert count == 5


def test_string_and_int(capsys):
    count = printf("%s is %d", "answer", -42)
    out = capsys.readouterr().out
    assert out == "answer is -42"
    assert count == len(out)


@pytest.mark.parametrize("spec", ["d", "i"])
def test_signed_integers(capsys, spec):
    printf("%" + spec, 2147483647)
    assert capsys.readouterr().out == "2147483647"


def test_min_int(capsys):
    printf("%d", -2147483648)
    assert capsys.readouterr().out == "-2147483648"


@pytest.mark.parametrize("n", [0, 1, 255, 4096, 0xCAFE])
def test_hex_octal_unsigned(capsys, n):
    printf("%x %X %o %u", n, n, n, n)
    out = capsys.readouterr().out
    assert out == f"{format(n, 'x')} {format(n, 'X')} {format(n, 'o')} {n}"


def test_negative_hex_wraps_to_32_bits(capsys):
    printf("%x", -1)
    assert capsys.readouterr().out == "f" * 8


def test_pointer(capsys):
    count = printf("%p", 4096)
    out = capsys.readouterr().out
    assert out == "0x" + format(4096, "x")
    assert count == len(out)


def test_char_forms(capsys):
    printf("%c%c", 65, "z")
    assert capsys.readouterr().out == "Az"


def test_percent_literal(capsys):
    count = printf("100%%")
    assert capsys.readouterr().out == "100%"
    assert count == 4


def test_trailing_percent_ignored(capsys):
    count = printf("ab%")
    assert capsys.readouterr().out == "ab"
    assert count == 2


def test_empty_format_rejected():
    with pytest.raises(ValueError):
        printf("")


def test_unknown_specifier_writes_nothing(capsys):
    with pytest.raises(ValueError):
        printf("before %q after", 1)
    assert capsys.readouterr().out == ""


def test_missing_argument():
    with pytest.raises(TypeError):
        printf("%d")


def test_none_string_rejected():
    with pytest.raises(TypeError):
        printf("%s", None)


def test_int_overflow_rejected():
    with pytest.raises(OverflowError):
        printf("%d", 2147483648)