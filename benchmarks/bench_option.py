"""Benchmarks for Option type.

Run with: uv run pytest benchmarks/ --benchmark-only -v
"""

from klaw_option import Nothing, Some, collect, lift, option

# =============================================================================
# Creation benchmarks
# =============================================================================


class TestOptionCreation:
    """Benchmark Option creation."""

    def test_some_creation(self, benchmark):
        """Benchmark Some creation."""
        benchmark(Some, 42)

    def test_option_factory_some(self, benchmark):
        """Benchmark option() with a present value."""
        benchmark(option, 42)

    def test_option_factory_nothing(self, benchmark):
        """Benchmark option() with None."""
        benchmark(option, None)


# =============================================================================
# Method call benchmarks
# =============================================================================


class TestOptionMethods:
    """Benchmark Option method calls."""

    def test_some_map(self, benchmark):
        """Benchmark Some.map."""
        some = Some(5)
        benchmark(some.map, lambda x: x * 2)

    def test_nothing_map(self, benchmark):
        """Benchmark Nothing.map."""
        benchmark(Nothing.map, lambda x: x * 2)

    def test_some_flat_map(self, benchmark):
        """Benchmark Some.flat_map."""
        some = Some(5)
        benchmark(some.flat_map, lambda x: Some(x * 2))

    def test_some_get_or_else(self, benchmark):
        """Benchmark Some.get_or_else."""
        some = Some(5)
        benchmark(some.get_or_else, 0)

    def test_nothing_get_or_else(self, benchmark):
        """Benchmark Nothing.get_or_else."""
        benchmark(Nothing.get_or_else, 0)


# =============================================================================
# Chaining benchmarks
# =============================================================================


class TestOptionChaining:
    """Benchmark chained Option operations."""

    def test_some_chain_3(self, benchmark):
        """Benchmark 3-step chain on Some."""

        def chain():
            return (
                Some(5)
                .map(lambda x: x + 1)
                .filter(lambda x: x > 2)
                .flat_map(lambda x: Some(x - 1))
            )

        benchmark(chain)

    def test_nothing_chain_3(self, benchmark):
        """Benchmark 3-step chain on Nothing (should short-circuit)."""

        def chain():
            return (
                Nothing.map(lambda x: x + 1)
                .filter(lambda x: x > 2)
                .flat_map(lambda x: Some(x - 1))
            )

        benchmark(chain)


# =============================================================================
# Combination benchmarks
# =============================================================================


class TestOptionCombination:
    """Benchmark collect() and lift()."""

    def test_collect_5(self, benchmark):
        """Benchmark collect() over five present values."""
        benchmark(collect, Some(1), 2, Some(3), 4, Some(5))

    def test_collect_early_nothing(self, benchmark):
        """Benchmark collect() short-circuiting on the first argument."""
        benchmark(collect, Nothing, 2, Some(3), 4, Some(5))

    def test_lift_2(self, benchmark):
        """Benchmark lift() with a two-argument combiner."""
        benchmark(lambda: lift(Some('a'), 'b', combine=lambda a, b: a + b))


# =============================================================================
# Pattern matching benchmarks
# =============================================================================


class TestOptionPatternMatching:
    """Benchmark match statement against the match() method."""

    def test_match_statement(self, benchmark):
        some = Some(42)

        def match_it():
            match some:
                case Some(v):
                    return v
                case _:
                    return None

        benchmark(match_it)

    def test_match_method(self, benchmark):
        some = Some(42)
        benchmark(lambda: some.match(some=lambda v: v, none=lambda: None))
