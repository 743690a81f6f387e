from funcore import ImmutableList


class TestImmutableList:
    def test_of_and_empty(self):
        assert list(ImmutableList.of(1, 2)) == [1, 2]
        assert len(ImmutableList.empty()) == 0

    def test_append_returns_new_list(self):
        original = ImmutableList.of(1, 2)
        extended = original.append(3)
        assert extended == (1, 2, 3)
        assert original == (1, 2)
        assert isinstance(extended, ImmutableList)

    def test_prepend_and_concat(self):
        items = ImmutableList.of(2)
        assert items.prepend(1) == (1, 2)
        assert items.concat([3, 4]) == (2, 3, 4)

    def test_repr(self):
        assert repr(ImmutableList.of(1, 2)) == "ImmutableList([1, 2])"

    def test_hashable(self):
        assert hash(ImmutableList.of(1, 2)) == hash((1, 2))

    def test_built_once_from_iterable(self):
        items = ImmutableList(n * 2 for n in range(3))
        assert items == (0, 2, 4)
        assert len(items) == 3
