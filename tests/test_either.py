import pytest

from funcore import either as E
from funcore import ImmutableList, Left, Nothing, Right, Some, UnwrapError
from funcore.algebra import default_eq, default_ord


class TestConstructors:
    def test_left_right_of(self):
        assert E.left("err") == Left("err")
        assert E.right(1) == Right(1)
        assert E.of(1) == Right(1)

    def test_variant_equality(self):
        assert Left(1) != Right(1)
        assert Right(1) == Right(1)

    def test_from_predicate_returns_validator(self):
        positive = E.from_predicate(lambda n: n > 0, lambda: "Negative value")
        assert positive(42) == Right(42)
        assert positive(-1) == Left("Negative value")

    def test_from_predicate_error_is_lazy(self, counter):
        error = counter("bad")
        positive = E.from_predicate(lambda n: n > 0, error)
        positive(1)
        assert error.count == 0

    def test_from_option(self):
        assert E.from_option(Some(1), lambda: "missing") == Right(1)
        assert E.from_option(Nothing(), lambda: "missing") == Left("missing")

    def test_from_nullable(self):
        assert E.from_nullable(None, lambda: "null") == Left("null")
        assert E.from_nullable(0, lambda: "null") == Right(0)

    def test_repr(self):
        assert repr(Left("x")) == "Left('x')"
        assert repr(Right(1)) == "Right(1)"


class TestFunctorMonad:
    def test_map(self):
        assert E.map(Right(1), lambda n: n + 1) == Right(2)

    def test_map_left_passthrough(self, counter):
        f = counter(0)
        err = Left("e")
        assert E.map(err, f) is err
        assert f.count == 0

    def test_map_left(self):
        assert E.map_left(Left("e"), str.upper) == Left("E")
        assert E.map_left(Right(1), str.upper) == Right(1)

    def test_flat_map(self):
        assert E.flat_map(Right(2), lambda n: Right(n * 10)) == Right(20)
        assert E.flat_map(Right(2), lambda _: Left("no")) == Left("no")

    def test_flat_map_left_never_calls_f(self, counter):
        f = counter(Right(1))
        assert E.flat_map(Left("e"), f) == Left("e")
        assert f.count == 0

    def test_ap(self):
        assert E.ap(Right(lambda n: n * 2), Right(21)) == Right(42)
        assert E.ap(Right(lambda n: n * 2), Left("value")) == Left("value")

    def test_ap_function_side_left_wins(self):
        assert E.ap(Left("function"), Left("value")) == Left("function")

    def test_swap(self):
        assert E.swap(Left(1)) == Right(1)
        assert E.swap(Right(1)) == Left(1)


class TestCaseAnalysis:
    def test_match(self):
        render = lambda e: E.match(e, on_left=lambda x: f"Fail: {x}", on_right=lambda v: f"Success: {v}")
        assert render(Left("bad")) == "Fail: bad"
        assert render(Right(5)) == "Success: 5"

    def test_match_w(self):
        assert E.match_w(Left("bad"), on_left=len, on_right=str) == 3

    def test_refinements(self):
        assert E.is_left(Left(1)) and not E.is_left(Right(1))
        assert E.is_right(Right(1)) and not E.is_right(Left(1))


class TestTap:
    def test_effect_on_right_only(self, counter):
        effect = counter()
        E.tap(Right(1), effect=effect)
        E.tap(Left("e"), effect=effect)
        assert effect.calls == [1]

    def test_chain_first_alias(self):
        assert E.chain_first is E.tap


class TestExtract:
    def test_get_or_else_default_takes_no_argument(self, counter):
        default = counter(0)
        assert E.get_or_else(Right(5), default) == 5
        assert default.count == 0
        assert E.get_or_else(Left("ignored"), default) == 0
        assert default.calls == [()]

    def test_to_option(self):
        assert E.to_option(Right(1)) == Some(1)
        assert E.to_option(Left("e")) == Nothing()

    def test_unwrap_carries_left_payload(self):
        assert E.unwrap(Right(1)) == 1
        with pytest.raises(UnwrapError) as exc_info:
            E.unwrap(Left("boom"))
        assert exc_info.value.value == "boom"


class TestEqOrd:
    def test_eq(self):
        eq = E.get_eq(default_eq(), default_eq())
        assert eq.equals(Left(1), Left(1))
        assert eq.equals(Right(1), Right(1))
        assert not eq.equals(Left(1), Right(1))

    def test_ord_left_before_right(self):
        ord = E.get_ord(default_ord(), default_ord())
        assert ord.compare(Left(100), Right(0)) < 0
        assert ord.compare(Right(0), Left(100)) > 0
        assert ord.compare(Right(1), Right(2)) < 0
        assert ord.compare(Left(2), Left(1)) > 0

    def test_sorted_with_ord(self):
        ord = E.get_ord(default_ord(), default_ord())
        from functools import cmp_to_key

        items = [Right(2), Left(5), Right(1), Left(3)]
        assert sorted(items, key=cmp_to_key(ord.compare)) == [Left(3), Left(5), Right(1), Right(2)]


class TestSequencing:
    def test_sequence_list_first_left(self):
        assert E.sequence_list([Right(1), Left("a"), Left("b")]) == Left("a")

    def test_sequence_list_success(self):
        assert E.sequence_list([Right(1), Right(2)]) == Right(ImmutableList.of(1, 2))

    def test_traverse_list(self):
        parse = lambda s: Right(int(s)) if s.isdigit() else Left(f"bad: {s}")
        assert E.traverse_list(["1", "2"], parse) == Right(ImmutableList.of(1, 2))
        assert E.traverse_list(["1", "x", "y"], parse) == Left("bad: x")
