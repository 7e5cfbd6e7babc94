"""Tests for Option type (Some and Nothing)."""

import copy
import pickle

import pytest
from hypothesis import given
from hypothesis import strategies as st

from klaw_option import (
    AbsentValueError,
    CombinatorArityError,
    KlawOptionError,
    Nothing,
    NothingType,
    Option,
    Some,
    collect,
    is_option,
    lift,
    option,
)
from tests.strategies import int_functions, integers, nullables, options, present_args, values


class TestOptionFactory:
    """Tests for option() construction from nullable values."""

    def test_creating_a_some(self):
        """option() wraps a present value."""
        some = option(10)
        assert some.is_defined()
        assert some.get() == 10

    def test_creating_a_some_with_an_empty_string(self):
        """Falsy values are still present."""
        some = option('')
        assert some.is_defined()
        assert some.get() == ''

    @pytest.mark.parametrize('falsy', [0, False, '', [], {}])
    def test_falsy_values_are_present(self, falsy):
        """Only None is absent."""
        assert option(falsy) == Some(falsy)

    def test_creating_nothing_with_none(self):
        """option(None) is Nothing."""
        nothing = option(None)
        assert not nothing.is_defined()
        assert nothing.get() is None
        assert nothing is Nothing

    def test_does_not_unwrap_options(self):
        """option() wraps an existing Option instead of normalizing it."""
        assert option(Some(1)) == Some(Some(1))
        assert option(Nothing) == Some(Nothing)

    @given(values)
    def test_present_values_are_defined(self, value):
        """For every present value, option(v) is defined and holds v."""
        some = option(value)
        assert some.is_defined() is True
        assert some.get() == value

    @given(nullables)
    def test_defined_iff_not_none(self, value):
        """option(v) is defined exactly when v is not None."""
        assert option(value).is_defined() is (value is not None)


class TestSomeCreation:
    """Tests for Some instantiation and basic properties."""

    def test_some_creation(self):
        """Some wraps a value."""
        some = Some(42)
        assert some.value == 42

    def test_some_with_none_raises(self):
        """Some(None) is a precondition violation, not Nothing."""
        with pytest.raises(AbsentValueError, match='requires a value'):
            Some(None)

    def test_absent_value_error_hierarchy(self):
        """AbsentValueError is both a KlawOptionError and a ValueError."""
        with pytest.raises(ValueError):
            Some(None)
        with pytest.raises(KlawOptionError) as exc_info:
            Some(None)
        assert exc_info.value.code == 'absent_value'
        assert str(exc_info.value).startswith('[absent_value]')

    def test_some_with_complex_value(self):
        """Some can wrap complex values."""
        data = {'key': [1, 2, 3]}
        some = Some(data)
        assert some.value is data

    def test_some_is_frozen(self):
        """Some instances are immutable."""
        some = Some(42)
        with pytest.raises(AttributeError):
            some.value = 100  # type: ignore[misc]
        with pytest.raises(AttributeError):
            del some.value

    def test_some_has_no_dict(self):
        """Some uses slots and accepts no extra attributes."""
        with pytest.raises(AttributeError):
            Some(1).other = 2  # type: ignore[attr-defined]

    def test_copy_and_pickle(self):
        """Some survives copy, deepcopy and pickle."""
        some = Some([1, 2])
        assert copy.copy(some) == some
        deep = copy.deepcopy(some)
        assert deep == some
        assert deep.value is not some.value
        assert pickle.loads(pickle.dumps(some)) == some


class TestNothingCreation:
    """Tests for the Nothing singleton."""

    def test_nothing_is_singleton(self):
        """Nothing is the only NothingType instance."""
        assert isinstance(Nothing, NothingType)
        assert NothingType() is Nothing

    def test_nothing_is_frozen(self):
        """Nothing is immutable."""
        with pytest.raises(AttributeError):
            Nothing.value = 42  # type: ignore[attr-defined]

    def test_copy_and_pickle_keep_identity(self):
        """Copies and unpickled Nothing are the singleton."""
        assert copy.copy(Nothing) is Nothing
        assert copy.deepcopy(Nothing) is Nothing
        assert pickle.loads(pickle.dumps(Nothing)) is Nothing


class TestOptionEquality:
    """Tests for Option equality and hashing."""

    def test_some_equality(self):
        """Some instances with same value are equal."""
        assert Some(42) == Some(42)
        assert Some('hello') == Some('hello')

    def test_some_inequality(self):
        """Some instances with different values are not equal."""
        assert Some(42) != Some(43)
        assert Some(42) != 42

    def test_some_not_equal_to_nothing(self):
        """Some is never equal to Nothing."""
        assert Some(42) != Nothing
        assert Nothing != Some(42)

    def test_some_hashable(self):
        """Some instances are hashable."""
        assert hash(Some(42)) == hash(Some(42))
        assert {Some(42): 'value'}[Some(42)] == 'value'

    def test_nothing_hashable(self):
        """Nothing is hashable."""
        assert {Nothing: 'value'}[NothingType()] == 'value'


class TestOptionQuerying:
    """Tests for is_defined() and is_none()."""

    def test_some_is_defined(self):
        assert Some(42).is_defined() is True
        assert Some(42).is_none() is False

    def test_nothing_is_not_defined(self):
        assert Nothing.is_defined() is False
        assert Nothing.is_none() is True

    def test_get_never_raises(self):
        """get() reports absence through its return value."""
        assert Some(42).get() == 42
        assert Nothing.get() is None

    def test_is_defined_narrows(self, sample_some):
        """is_defined() can be used as a variant discriminator."""
        opt: Option[str] = sample_some
        if opt.is_defined():
            assert opt.value.upper() == 'HELLO'
        else:
            pytest.fail('expected Some')


class TestOptionForEach:
    """Tests for for_each."""

    def test_some_for_each(self):
        """Some.for_each() calls the function with the value."""
        state = []
        assert Some(10).for_each(state.append) is None
        option(10).for_each(state.append)
        assert state == [10, 10]

    def test_nothing_for_each(self):
        """Nothing.for_each() is a no-op."""
        state = []
        option(None).for_each(state.append)
        assert state == []


class TestOptionMap:
    """Tests for map."""

    def test_some_map_to_some(self):
        """Some.map() transforms the value."""
        assert option(10).map(lambda x: x * 2) == Some(20)

    def test_some_map_to_nothing(self):
        """Some.map() returning None gives Nothing."""
        assert option(10).map(lambda x: None) is Nothing

    def test_some_map_to_falsy(self):
        """Falsy but present results stay Some."""
        assert option(10).map(lambda x: 0) == Some(0)

    def test_nothing_map(self):
        """Nothing.map() returns Nothing without calling f."""
        calls = []
        assert Nothing.map(calls.append) is Nothing
        assert calls == []

    def test_map_calls_f_once(self):
        """Some.map() calls f exactly once."""
        calls = []

        def f(x):
            calls.append(x)
            return x

        Some(3).map(f)
        assert calls == [3]

    @given(values)
    def test_identity_law(self, value):
        """Mapping the identity function changes nothing."""
        assert option(value).map(lambda x: x) == option(value)

    @given(integers, int_functions, int_functions)
    def test_composition_law(self, value, f, g):
        """map(f).map(g) equals map(g . f) when nothing maps to None."""
        assert Some(value).map(f).map(g) == Some(value).map(lambda x: g(f(x)))


class TestOptionFlatMap:
    """Tests for flat_map."""

    def test_some_flat_map_to_some(self):
        assert option(10).flat_map(lambda x: option(x * 2)) == Some(20)

    def test_some_flat_map_to_nothing(self):
        assert option(10).flat_map(lambda _: Nothing) is Nothing

    def test_some_flat_map_does_not_rewrap(self):
        """The Option returned by f is returned as is."""
        inner = Some('x')
        assert Some(1).flat_map(lambda _: inner) is inner

    def test_nothing_flat_map(self):
        """Nothing.flat_map() never calls f."""
        calls = []
        assert Nothing.flat_map(lambda x: calls.append(x) or option(10)) is Nothing
        assert Nothing.flat_map(lambda _: Nothing) is Nothing
        assert calls == []


class TestOptionFilter:
    """Tests for filter."""

    def test_some_filter_keeps(self):
        some = option(10)
        assert some.filter(lambda x: x > 5) is some

    def test_some_filter_drops(self):
        assert option(10).filter(lambda x: x > 10) is Nothing

    def test_nothing_filter(self):
        """Nothing.filter() never calls the predicate."""
        calls = []

        def predicate(x):
            calls.append(x)
            return True

        assert Nothing.filter(predicate) is Nothing
        assert Nothing.filter(lambda _: False) is Nothing
        assert calls == []

    @given(integers, st.integers(min_value=-5, max_value=5))
    def test_filter_iff_predicate(self, value, threshold):
        """Some(v).filter(p) is Some(v) exactly when p(v)."""
        result = Some(value).filter(lambda x: x > threshold)
        assert result == (Some(value) if value > threshold else Nothing)


class TestOptionGetOrElse:
    """Tests for get_or_else and get_or_else_get."""

    def test_some_get_or_else(self):
        assert option('').get_or_else('alt') == ''

    def test_nothing_get_or_else(self):
        assert option(None).get_or_else(20) == 20

    def test_some_get_or_else_get_does_not_call(self):
        """The lazy default is not computed for Some."""
        called = False

        def factory():
            nonlocal called
            called = True
            return 0

        assert Some(42).get_or_else_get(factory) == 42
        assert called is False

    def test_nothing_get_or_else_get(self):
        assert Nothing.get_or_else_get(lambda: 7) == 7


class TestOptionOrElse:
    """Tests for or_else."""

    def test_some_or_else_some(self):
        some = option(10)
        assert some.or_else(lambda: option(20)) is some

    def test_some_or_else_is_lazy(self):
        """The alternative is not evaluated for Some."""
        calls = []
        Some(10).or_else(lambda: calls.append(1) or Nothing)
        assert calls == []

    def test_nothing_or_else_some(self):
        assert option(None).or_else(lambda: option(20)) == Some(20)

    def test_nothing_or_else_nothing(self):
        assert option(None).or_else(lambda: Nothing) is Nothing


class TestOptionMatch:
    """Tests for the match() method and structural pattern matching."""

    def test_some_match(self):
        result = option(10).match(some=lambda x: str(x * 2), none=lambda: 999)
        assert result == '20'

    def test_nothing_match(self):
        result = option(None).match(some=lambda x: str(x * 2), none=lambda: '999')
        assert result == '999'

    def test_match_calls_exactly_one_handler(self):
        calls = []
        Some(1).match(some=lambda x: calls.append('some'), none=lambda: calls.append('none'))
        Nothing.match(some=lambda x: calls.append('some'), none=lambda: calls.append('none'))
        assert calls == ['some', 'none']

    @pytest.mark.parametrize(('opt', 'expected'), [(Some(5), 5), (Nothing, 'empty')])
    def test_match_statement(self, opt, expected):
        """Options work with the match statement."""
        match opt:
            case Some(value):
                result = value
            case NothingType():
                result = 'empty'
        assert result == expected


class TestCollect:
    """Tests for collect() (tuple form of combining Options)."""

    def test_two_some_args(self):
        assert collect(Some('a'), Some('b')) == Some(('a', 'b'))

    def test_some_and_plain_value(self):
        assert collect(Some('a'), 'b') == Some(('a', 'b'))

    def test_three_some_args(self):
        assert collect(option('a'), option('b'), option('c')) == Some(('a', 'b', 'c'))

    def test_some_and_nothing(self):
        assert collect(Some('a'), option(None)) is Nothing

    def test_some_and_none(self):
        assert collect(Some('a'), None) is Nothing

    def test_no_args(self):
        """With nothing to combine the result is an empty tuple."""
        assert collect() == Some(())

    def test_unwrapped_values_are_present(self):
        """Every value in the result tuple is unwrapped and not None."""
        nullable = 'a'
        result = collect(option(nullable), 'b', nullable)
        assert result.is_defined()
        a, b, c = result.get()
        assert (a.upper(), b, c.upper()) == ('A', 'b', 'A')

    @given(st.lists(present_args, min_size=1, max_size=6))
    def test_all_present_keeps_order(self, args):
        expected = tuple(a.value if isinstance(a, Some) else a for a in args)
        assert collect(*args) == Some(expected)

    @given(st.lists(present_args, max_size=5), st.data())
    def test_any_absent_gives_nothing(self, args, data):
        """One absent argument in any position forces Nothing."""
        position = data.draw(st.integers(min_value=0, max_value=len(args)))
        absent = data.draw(st.sampled_from([None, Nothing]))
        args.insert(position, absent)
        assert collect(*args) is Nothing


class TestLift:
    """Tests for lift() (combiner form of combining Options)."""

    def test_two_args_with_combiner(self):
        assert lift(Some('a'), Some('b'), combine=lambda a, b: a + b) == Some('ab')

    def test_five_args(self):
        result = lift(1, Some(2), 3, Some(4), 5, combine=lambda *xs: sum(xs))
        assert result == Some(15)

    def test_absent_arg_skips_combiner(self):
        calls = []
        result = lift(Some('a'), Nothing, combine=lambda a, b: calls.append((a, b)))
        assert result is Nothing
        assert calls == []

    def test_combiner_returning_none(self):
        """The combiner's result is normalized through option()."""
        assert lift(1, 2, combine=lambda a, b: None) is Nothing

    def test_non_callable_combiner(self):
        with pytest.raises(CombinatorArityError):
            lift(1, 2, combine='not a function')  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            lift(1, 2, combine=None)  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        'combine',
        [lambda a: a, lambda a, b, c: a, lambda a, *, b: a],
    )
    def test_combiner_with_wrong_arity(self, combine):
        """A combiner that cannot take every value is rejected before the call."""
        with pytest.raises(CombinatorArityError) as exc_info:
            lift(1, 2, combine=combine)
        assert exc_info.value.arity == 2
        assert exc_info.value.code == 'combinator'

    def test_wrong_arity_is_reported_even_when_absent(self):
        with pytest.raises(CombinatorArityError):
            lift(1, Nothing, combine=lambda a: a)

    def test_combiner_errors_propagate_unchanged(self):
        """A TypeError raised inside a valid combiner is not rewrapped."""

        def combine(a, b):
            return a + b

        with pytest.raises(TypeError) as exc_info:
            lift(1, 'x', combine=combine)
        assert not isinstance(exc_info.value, CombinatorArityError)

    def test_combiner_with_defaults_and_builtins(self):
        assert lift(1, 2, combine=lambda a, b, c=3: a + b + c) == Some(6)
        assert lift(Some('a'), Some('b'), combine=str.__add__) == Some('ab')
        assert lift(3, -1, combine=max) == Some(3)

    def test_combiner_is_required(self):
        with pytest.raises(TypeError):
            lift(1, 2)  # type: ignore[call-overload]

    @given(st.lists(integers, min_size=1, max_size=5))
    def test_lift_matches_collect(self, args):
        """lift(..., combine=f) equals collect(...).map(lambda t: f(*t))."""
        assert lift(*args, combine=lambda *xs: sum(xs)) == collect(*args).map(sum)


class TestIsOption:
    """Tests for is_option()."""

    @pytest.mark.parametrize('value', [True, False, '', [], 0, None, object()])
    def test_non_options(self, value):
        assert is_option(value) is False

    @pytest.mark.parametrize('value', [Nothing, option(33), option(None), Some(Nothing)])
    def test_options(self, value):
        assert is_option(value) is True

    def test_look_alike_is_not_an_option(self):
        """The check is nominal, not structural."""

        class FakeSome:
            value = 1

            def is_defined(self):
                return True

            def get(self):
                return 1

        assert is_option(FakeSome()) is False

    @given(options)
    def test_generated_options(self, opt):
        assert is_option(opt)


class TestOptionStr:
    """Tests for string representations."""

    def test_some_str(self):
        assert str(option(10)) == 'Some(10)'
        assert f'{Some("a")}' == 'Some(a)'

    def test_nothing_str(self):
        assert str(option(None)) == 'None'

    def test_repr(self):
        assert repr(Some(10)) == 'Some(value=10)'
        assert repr(Some('a')) == "Some(value='a')"
        assert repr(Nothing) == 'Nothing'
