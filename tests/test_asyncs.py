import threading
from concurrent.futures import Future

import pytest

from cpr.asyncs import AsyncWrapper, CancellationResult, cleanup, startup, submit


@pytest.fixture(autouse=True)
def _fresh_pool():
    cleanup()
    yield
    cleanup()


def _done_future(value):
    future = Future()
    future.set_result(value)
    return future


def test_submit_runs_function():
    wrapper = submit(lambda a, b=0: a + b, 2, b=3)
    assert wrapper.get() == 5


def test_get_twice_raises():
    wrapper = AsyncWrapper(_done_future("x"))
    assert wrapper.valid() is True
    assert wrapper.get() == "x"
    assert wrapper.valid() is False
    with pytest.raises(RuntimeError):
        wrapper.get()


def test_get_reraises_task_exception():
    def fail():
        raise KeyError("boom")

    with pytest.raises(KeyError):
        submit(fail).get()


def test_non_cancellable_cancel_is_invalid():
    wrapper = AsyncWrapper(_done_future(1))
    assert wrapper.cancel() is CancellationResult.invalid_operation
    assert wrapper.is_cancelled() is False
    assert wrapper.get() == 1


def test_cancellable_cancel():
    state = threading.Event()
    wrapper = AsyncWrapper(Future(), state)
    assert wrapper.cancel() is CancellationResult.success
    assert state.is_set()
    assert wrapper.is_cancelled() is True
    assert wrapper.valid() is False
    assert wrapper.cancel() is CancellationResult.invalid_operation
    with pytest.raises(RuntimeError):
        wrapper.get()
    with pytest.raises(RuntimeError):
        wrapper.wait(0)


def test_wait_times_out_on_pending_future():
    wrapper = AsyncWrapper(Future())
    assert wrapper.wait(0.01) is False


def test_wait_on_finished_future():
    wrapper = AsyncWrapper(_done_future(3))
    assert wrapper.wait() is True
    assert wrapper.get() == 3


def test_dropping_cancellable_wrapper_cancels():
    state = threading.Event()
    wrapper = AsyncWrapper(Future(), state)
    del wrapper
    assert state.is_set()


def test_startup_twice_and_cleanup():
    startup(1, 2, 100)
    startup(1, 4, 100)
    assert submit(lambda: "ok").get() == "ok"
    cleanup()
    assert submit(lambda: "again").get() == "again"


def test_startup_rejects_bad_thread_counts():
    with pytest.raises(ValueError):
        startup(5, 2, 100)


def test_many_tasks_all_complete():
    counter = []
    lock = threading.Lock()

    def bump():
        with lock:
            counter.append(1)
            return len(counter)

    startup(1, 4, 100)
    wrappers = [submit(bump) for _ in range(100)]
    results = [wrapper.get() for wrapper in wrappers]
    assert sorted(results) == list(range(1, 101))
    assert len(counter) == 100