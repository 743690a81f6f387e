from funcore import option as O
from funcore.function import flow, identity, pipe


class TestFunction:
    def test_identity(self):
        marker = object()
        assert identity(marker) is marker

    def test_pipe(self):
        assert pipe(2, lambda x: x + 1, lambda x: x * 10) == 30
        assert pipe("unchanged") == "unchanged"

    def test_pipe_with_containers(self):
        result = pipe(
            O.some(2),
            lambda o: O.map(o, lambda n: n + 1),
            lambda o: O.get_or_else(o, lambda: 0),
        )
        assert result == 3

    def test_flow(self):
        inc_then_double = flow(lambda x: x + 1, lambda x: x * 2)
        assert inc_then_double(1) == 4
        assert flow()(5) == 5
