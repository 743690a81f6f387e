from funcore import predicate as P

is_even = lambda n: n % 2 == 0
is_positive = lambda n: n > 0


class TestCombinators:
    def test_and(self):
        both = P.and_(is_even, is_positive)
        assert both(2)
        assert not both(-2)
        assert not both(3)

    def test_and_short_circuits(self, counter):
        second = counter(True)
        P.and_(is_even, second)(3)
        assert second.count == 0

    def test_or(self):
        either = P.or_(is_even, is_positive)
        assert either(-2)
        assert either(3)
        assert not either(-3)

    def test_not(self):
        assert P.not_(is_even)(3)
        assert not P.not_(is_even)(4)

    def test_contramap(self):
        long_name = P.contramap(lambda n: n > 3, len)
        assert long_name("Takashi")
        assert not long_name("Esra")


class TestMatch:
    def test_only_chosen_branch_runs(self, counter):
        on_false = counter("odd")
        label = P.match(is_even, on_true=lambda: "even", on_false=on_false)
        assert label(2) == "even"
        assert on_false.count == 0
        assert label(3) == "odd"
