from monads import Success, Try, lift as L


def test_lift_supplier():
    lifted = Try.lift(lambda: "testing")
    assert lifted().get() == "testing"


def test_lift_function():
    lifted = Try.lift(lambda value: value + "thing")
    assert lifted("testing ").get() == "testing thing"


def test_lift_bi_function():
    lifted = Try.lift(lambda a, b: len(a) + len(b))
    assert lifted("thing", "thing2").get() == len("thingthing2")


def test_lift_captures():
    parse = Try.lift(int)
    assert parse("42") == Success(42)
    assert parse("nope").is_failure()


def test_lift_is_lazy():
    calls = []
    lifted = Try.lift(calls.append)
    assert calls == []
    lifted("x")
    assert calls == ["x"]


def test_lift_void():
    seen = []
    assert Try.lift_void(lambda: seen.append("stuff"))() == Success(None)
    assert Try.lift_void(lambda v: seen.append(v) or "dropped")("stuff") == Success(None)
    assert Try.lift_void(lambda a, b: seen.append(a + b))("stuff", " more") == Success(None)
    assert seen == ["stuff", "stuff", "stuff more"]


def test_lifted_decorator():
    @L.lifted
    def parse_port(raw: str) -> int:
        return int(raw)

    assert parse_port.__name__ == "parse_port"
    assert parse_port("8080").get() == 8080
    assert parse_port("http").is_failure()


def test_lifted_void_decorator():
    seen = []

    @L.lifted_void
    def record(value):
        seen.append(value)
        return value

    assert record("x") == Success(None)
    assert seen == ["x"]


def test_call():
    assert L.call(int, "42") == Success(42)
    assert L.call(int, "ff", base=16) == Success(255)
    assert L.call(int, "zz").is_failure()
