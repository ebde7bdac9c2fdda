"""Tests for when, when_effect, unless, unless_effect and if_."""

from klaw_fp import Left, Nothing, Right, Some
from klaw_fp import effect as fx


class TestWhen:
    """Tests for when and unless."""

    async def test_when_true(self) -> None:
        assert await fx.succeed(5).pipe(fx.when(lambda x: x > 0)) == Right(Some(5))

    async def test_when_false(self) -> None:
        assert await fx.succeed(-5).pipe(fx.when(lambda x: x > 0)) == Right(Nothing)

    async def test_when_left_skips_predicate(self) -> None:
        calls = []
        effect = fx.fail('e').pipe(fx.when(lambda x: calls.append(x) or True))
        assert await effect == Left('e')
        assert calls == []

    async def test_unless(self) -> None:
        assert await fx.succeed(5).pipe(fx.unless(lambda x: x > 0)) == Right(Nothing)
        assert await fx.succeed(-5).pipe(fx.unless(lambda x: x > 0)) == Right(Some(-5))

    async def test_unless_left(self) -> None:
        assert await fx.fail('e').pipe(fx.unless(lambda x: False)) == Left('e')


class TestWhenEffect:
    """Tests for when_effect and unless_effect."""

    async def test_when_effect_true(self) -> None:
        effect = fx.succeed('admin').pipe(fx.when_effect(lambda role: fx.succeed(role == 'admin')))
        assert await effect == Right(Some('admin'))

    async def test_when_effect_false(self) -> None:
        effect = fx.succeed('guest').pipe(fx.when_effect(lambda role: fx.succeed(role == 'admin')))
        assert await effect == Right(Nothing)

    async def test_when_effect_predicate_failure(self) -> None:
        effect = fx.succeed(1).pipe(fx.when_effect(lambda _: fx.fail('lookup failed')))
        assert await effect == Left('lookup failed')

    async def test_when_effect_self_failure_skips_predicate(self) -> None:
        calls = []

        def predicate(value):
            calls.append(value)
            return fx.succeed(True)

        assert await fx.fail('e').pipe(fx.when_effect(predicate)) == Left('e')
        assert calls == []

    async def test_unless_effect(self) -> None:
        assert await fx.succeed(1).pipe(fx.unless_effect(lambda _: fx.succeed(True))) == Right(Nothing)
        assert await fx.succeed(1).pipe(fx.unless_effect(lambda _: fx.succeed(False))) == Right(Some(1))

    async def test_unless_effect_predicate_failure(self) -> None:
        effect = fx.succeed(1).pipe(fx.unless_effect(lambda _: fx.fail('nope')))
        assert await effect == Left('nope')


class TestIf:
    """Tests for if_."""

    async def test_true_branch(self) -> None:
        effect = fx.if_(fx.succeed(True), on_true=lambda: fx.succeed('yes'), on_false=lambda: fx.succeed('no'))
        assert await effect == Right('yes')

    async def test_false_branch(self) -> None:
        effect = fx.if_(fx.succeed(False), on_true=lambda: fx.succeed('yes'), on_false=lambda: fx.fail('no'))
        assert await effect == Left('no')

    async def test_only_selected_branch_is_built(self) -> None:
        built = []

        def branch(name):
            def _thunk():
                built.append(name)
                return fx.succeed(name)

            return _thunk

        effect = fx.if_(fx.succeed(True), on_true=branch('true'), on_false=branch('false'))
        assert built == []
        await effect
        assert built == ['true']

    async def test_condition_failure_skips_branches(self) -> None:
        built = []
        effect = fx.if_(
            fx.fail('no condition'),
            on_true=lambda: built.append('true') or fx.succeed(1),
            on_false=lambda: built.append('false') or fx.succeed(0),
        )
        assert await effect == Left('no condition')
        assert built == []

    async def test_branch_rebuilt_per_run(self) -> None:
        built = []
        effect = fx.if_(fx.succeed(False), on_true=lambda: fx.succeed(1), on_false=lambda: built.append(1) or fx.succeed(0))
        await effect
        await effect
        assert built == [1, 1]
