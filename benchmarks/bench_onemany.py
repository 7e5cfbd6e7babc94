"""Benchmarks for OneMany type.

Run with: uv run pytest benchmarks/ --benchmark-only -v
"""

from klaw_option import Many, One


class TestOneManyMethods:
    """Benchmark OneMany method calls."""

    def test_one_creation(self, benchmark):
        benchmark(One, 42)

    def test_one_map(self, benchmark):
        one = One(5)
        benchmark(one.map, lambda x: x * 2)

    def test_many_map_passthrough(self, benchmark):
        many = Many([1, 2, 3])
        benchmark(many.map, lambda x: x * 2)

    def test_many_map_many(self, benchmark):
        many = Many(list(range(100)))
        benchmark(many.map_many, lambda xs: [x * 2 for x in xs])

    def test_fold(self, benchmark):
        one = One(5)
        benchmark(one.fold, len, abs)

    def test_many_str(self, benchmark):
        many = Many(list(range(100)))
        benchmark(str, many)
