import pytest

from mtcenter.command import Namespace
from mtcenter.parser import ParseError, parse_line


@pytest.mark.parametrize("line", ["", "   ", "\t\n"])
def test_empty_command(line):
    with pytest.raises(ParseError, match="empty command"):
        parse_line(line)


def test_unknown_namespace():
    with pytest.raises(ParseError, match="unknown namespace 'foo'"):
        parse_line("foo bar")


def test_missing_action():
    with pytest.raises(ParseError, match="missing action verb"):
        parse_line("system")


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_line("nowhere go")


@pytest.mark.parametrize(
    "word, namespace",
    [
        ("system", Namespace.SYSTEM),
        ("module", Namespace.MODULE),
        ("plugin", Namespace.PLUGIN),
        ("security", Namespace.SECURITY),
        ("data", Namespace.DATA),
        ("ai", Namespace.AI),
        ("bio", Namespace.BIO),
        ("cloud", Namespace.CLOUD),
        ("session", Namespace.SESSION),
        ("audit", Namespace.AUDIT),
        ("upgrade", Namespace.UPGRADE),
        ("integrator", Namespace.INTEGRATOR),
        ("custom", Namespace.CUSTOM),
        ("phone", Namespace.TELEPHONY),
        ("tel", Namespace.TELEPHONY),
    ],
)
def test_namespace_words(word, namespace):
    assert parse_line(f"{word} act").namespace is namespace


def test_target_and_flags():
    cmd = parse_line("  module load alpha --force beta -v  ")
    assert cmd.action == "load"
    assert cmd.target == "alpha"
    assert cmd.flags == ("--force", "beta", "-v")
    assert cmd.raw == "module load alpha --force beta -v"


def test_flags_before_target():
    cmd = parse_line("security mfa --enroll alice")
    assert cmd.target == "alice"
    assert cmd.flags == ("--enroll",)


def test_no_target():
    cmd = parse_line("session save --now")
    assert cmd.target is None
    assert cmd.flags == ("--now",)


def test_namespace_is_case_sensitive():
    with pytest.raises(ParseError):
        parse_line("System status")