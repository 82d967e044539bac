"""OwnerContext: serialized execution on one worker thread."""
import threading

import pytest

from fieldlog.context import InlineContext, OwnerContext


@pytest.fixture
def owner():
    ctx = OwnerContext()
    yield ctx
    ctx.shutdown()


@pytest.mark.unit
class TestOwnerContext:

    def test_call_returns_result_on_owner_thread(self, owner):
        ident = owner.call(threading.get_ident)
        assert ident != threading.get_ident()
        assert owner.call(owner.is_owner) is True
        assert owner.is_owner() is False

    def test_reentrant_call_does_not_deadlock(self, owner):
        assert owner.call(lambda: owner.call(lambda: 42)) == 42

    def test_posts_run_in_order(self, owner):
        seen = []
        for i in range(20):
            owner.post(seen.append, i)
        owner.call(lambda: None)
        assert seen == list(range(20))

    def test_call_propagates_errors(self, owner):
        def boom():
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            owner.call(boom)


@pytest.mark.unit
def test_inline_context_runs_immediately():
    ctx = InlineContext()
    seen = []
    ctx.post(seen.append, 1)
    assert seen == [1]
    assert ctx.call(lambda: 7) == 7


@pytest.mark.unit
def test_inline_post_keeps_failure_on_future():
    ctx = InlineContext()

    def boom():
        raise RuntimeError("boom")

    fut = ctx.post(boom)
    assert fut.done()
    assert isinstance(fut.exception(), RuntimeError)


@pytest.mark.unit
def test_owner_post_keeps_failure_on_future(owner):
    def boom():
        raise RuntimeError("boom")

    fut = owner.post(boom)
    assert isinstance(fut.exception(timeout=5), RuntimeError)
    # the worker survives a failed callback
    assert owner.call(lambda: 1) == 1
