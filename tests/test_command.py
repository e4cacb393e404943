from mtcenter.command import CommandInvocation, CommandResult, Namespace


def test_success_without_payload():
    result = CommandResult.success("done")
    assert result.ok is True
    assert result.message == "done"
    assert result.payload is None


def test_success_with_payload():
    result = CommandResult.success("stats", {"count": 2})
    assert result.ok is True
    assert result.payload == {"count": 2}


def test_failure():
    result = CommandResult.failure("broken")
    assert result.ok is False
    assert result.message == "broken"
    assert result.payload is None


def test_namespace_str_is_variant_name():
    telephony = CommandResult.failure(f"no handler for {Namespace.TELEPHONY} dial")
    ai = CommandResult.failure(f"no handler for {Namespace.AI} analyze")
    assert telephony.message == "no handler for Telephony dial"
    assert ai.message == "no handler for Ai analyze"


def test_invocation_fields_and_flags():
    cmd = CommandInvocation(
        Namespace.SYSTEM, "crawl", None, ("--fast",), "system crawl --fast"
    )
    assert cmd.namespace is Namespace.SYSTEM
    assert cmd.action == "crawl"
    assert cmd.target is None
    assert cmd.has_flag("--fast")
    assert not cmd.has_flag("--slow")
    assert cmd.raw == "system crawl --fast"


def test_invocations_compare_by_value():
    a = CommandInvocation(Namespace.DATA, "ingest", "src", (), "data ingest src")
    b = CommandInvocation(Namespace.DATA, "ingest", "src", (), "data ingest src")
    assert a == b