"""Property-based tests for runtime kinds and literal rendering."""

from enum import Enum, IntEnum

from hypothesis import given
from hypothesis import strategies as st

from lifeboat import MISSING, Kind, describe, kind_of, render_literal, ty
from lifeboat.kinds import MAX_RENDERED_DEPTH, MAX_RENDERED_ITEMS, MAX_SAFE_INTEGER, strict_equals


class Flag(Enum):
    ON = "on"
    OFF = "off"


class Level(IntEnum):
    LOW = 1
    HIGH = 2


class Mode(str, Enum):
    READ = "read"
    WRITE = "write"


SIMPLE = {
    Kind.UNDEFINED: ty.undefined(),
    Kind.BOOLEAN: ty.boolean(),
    Kind.NUMBER: ty.number(),
    Kind.BIGINT: ty.bigint(),
    Kind.STRING: ty.string(),
    Kind.SYMBOL: ty.symbol(),
}

json_like = st.recursive(
    st.none() | st.booleans() | st.integers() | st.floats() | st.text(),
    lambda children: st.lists(children, max_size=4)
    | st.dictionaries(st.text(max_size=5), children, max_size=4),
    max_leaves=20,
)

any_value = st.one_of(
    json_like,
    st.just(MISSING),
    st.sampled_from(Flag) | st.sampled_from(Level) | st.sampled_from(Mode),
    st.integers(min_value=MAX_SAFE_INTEGER + 1),
    st.tuples(st.integers(), st.text()),
    st.dictionaries(st.integers(), st.integers(), max_size=3),
    st.binary(),
    st.builds(object),
)


def _assert_only(kind, value):
    for tag, validator in SIMPLE.items():
        assert validator.check(value) is (tag is kind)


@given(st.text())
def test_strings_are_only_strings(value):
    assert kind_of(value) is Kind.STRING
    _assert_only(Kind.STRING, value)


@given(st.booleans())
def test_booleans_are_only_booleans(value):
    _assert_only(Kind.BOOLEAN, value)


@given(st.floats() | st.integers(min_value=-MAX_SAFE_INTEGER, max_value=MAX_SAFE_INTEGER))
def test_numbers_are_only_numbers(value):
    _assert_only(Kind.NUMBER, value)


@given(st.integers(min_value=MAX_SAFE_INTEGER + 1) | st.integers(max_value=-MAX_SAFE_INTEGER - 1))
def test_large_integers_are_bigints(value):
    _assert_only(Kind.BIGINT, value)


@given(st.sampled_from(Flag) | st.sampled_from(Level) | st.sampled_from(Mode) | st.sampled_from(Kind))
def test_enum_members_are_symbols(value):
    _assert_only(Kind.SYMBOL, value)


def test_missing_is_undefined():
    _assert_only(Kind.UNDEFINED, MISSING)


@given(st.none() | st.lists(st.integers()) | st.dictionaries(st.text(), st.integers()))
def test_null_and_containers_are_objects(value):
    assert kind_of(value) is Kind.OBJECT
    _assert_only(None, value)


@given(any_value)
def test_simple_validator_accepts_exactly_its_kind(value):
    for tag, validator in SIMPLE.items():
        assert validator.check(value) is (kind_of(value) is tag)


@given(any_value)
def test_render_literal_never_raises(value):
    assert isinstance(render_literal(value), str)


@given(any_value)
def test_describe(value):
    if value is None:
        assert describe(value) == "null"
    else:
        assert describe(value) == f"type {kind_of(value)}"


class TestRenderLiteral:
    def test_primitives(self):
        assert render_literal("a\"b") == '"a\\"b"'
        assert render_literal(True) == "true"
        assert render_literal(False) == "false"
        assert render_literal(None) == "null"
        assert render_literal(MISSING) == "undefined"
        assert render_literal(42) == "42"
        assert render_literal(1.5) == "1.5"
        assert render_literal(2.0) == "2"

    def test_values_without_literal_form(self):
        assert render_literal(float("nan")) == "NaN"
        assert render_literal(float("inf")) == "Infinity"
        assert render_literal(float("-inf")) == "-Infinity"
        assert render_literal(2**64) == f"{2**64}n"
        assert render_literal(Flag.ON) == "symbol Flag.ON"
        assert render_literal(b"x") == "instance of bytes"
        assert render_literal({1: 2}) == "instance of dict"

    def test_containers(self):
        assert render_literal([1, "a", None]) == '[1, "a", null]'
        assert render_literal((True,)) == "[true]"
        assert render_literal({"a": [1], "b": {}}) == '{"a": [1], "b": {}}'

    def test_enum_subclasses(self):
        assert kind_of(Level.LOW) is Kind.SYMBOL
        assert kind_of(Mode.READ) is Kind.SYMBOL
        assert render_literal(Level.LOW) == "symbol Level.LOW"
        assert render_literal(Mode.READ) == "symbol Mode.READ"
        assert not strict_equals(Level.LOW, 1)

    def test_cyclic_list(self):
        loop = [1]
        loop.append(loop)
        assert render_literal(loop) == "[1, [Circular]]"

    def test_cyclic_dict(self):
        node = {"name": "a"}
        node["self"] = node
        assert render_literal(node) == '{"name": "a", "self": [Circular]}'

    def test_shared_but_acyclic_values_render_in_full(self):
        shared = [1]
        assert render_literal([shared, shared]) == "[[1], [1]]"

    def test_long_containers_are_truncated(self):
        rendered = render_literal(list(range(10**6)))
        expected_items = ", ".join(str(i) for i in range(MAX_RENDERED_ITEMS))
        assert rendered == f"[{expected_items}, ...]"

        record = {f"k{i}": i for i in range(MAX_RENDERED_ITEMS + 1)}
        assert render_literal(record).endswith(", ...}")

    def test_deep_nesting_is_cut_off(self):
        deep = []
        for _ in range(100_000):
            deep = [deep]
        rendered = render_literal(deep)
        assert rendered == "[" * MAX_RENDERED_DEPTH + "[...]" + "]" * MAX_RENDERED_DEPTH

    def test_containers_at_the_limit_are_not_truncated(self):
        rendered = render_literal(list(range(MAX_RENDERED_ITEMS)))
        assert not rendered.endswith("...]")


class TestStrictEquals:
    def test_primitives_compare_by_value(self):
        assert strict_equals("a", "a")
        assert strict_equals(1, 1.0)
        assert strict_equals(2**60, 2**60)
        assert not strict_equals(1, True)
        assert not strict_equals(0, False)
        assert not strict_equals(float("nan"), float("nan"))

    def test_objects_compare_by_identity(self):
        value = {"a": 1}
        assert strict_equals(value, value)
        assert not strict_equals(value, {"a": 1})
        assert strict_equals(None, None)

    def test_sentinels(self):
        assert strict_equals(MISSING, MISSING)
        assert not strict_equals(MISSING, None)
