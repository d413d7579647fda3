import threading

from src.staff_movement.staff_movement.sync.dispatcher import InlineDispatcher, UpdateDispatcher


def test_writes_run_in_background_and_are_counted():
    done = []
    dispatcher = UpdateDispatcher(max_workers=2, max_pending=8)
    try:
        for i in range(3):
            assert dispatcher.submit(f"write {i}", done.append, i)
        assert dispatcher.wait(timeout=5)
    finally:
        dispatcher.shutdown()

    assert sorted(done) == [0, 1, 2]
    stats = dispatcher.stats()
    assert (stats.submitted, stats.succeeded, stats.failed, stats.dropped) == (3, 3, 0, 0)


def test_one_failure_does_not_block_others():
    done = []

    def boom():
        raise RuntimeError("store down")

    dispatcher = UpdateDispatcher(max_workers=1, max_pending=8)
    try:
        dispatcher.submit("bad", boom)
        dispatcher.submit("good", done.append, "ok")
        dispatcher.wait(timeout=5)
    finally:
        dispatcher.shutdown()

    assert done == ["ok"]
    assert dispatcher.stats().failed == 1
    assert dispatcher.stats().succeeded == 1


def test_full_queue_drops_new_writes():
    release = threading.Event()
    dispatcher = UpdateDispatcher(max_workers=1, max_pending=1)
    try:
        assert dispatcher.submit("slow", release.wait, 5)
        assert dispatcher.submit("extra", lambda: None) is False
        assert dispatcher.stats().dropped == 1
        release.set()
        assert dispatcher.wait(timeout=5)
    finally:
        release.set()
        dispatcher.shutdown()

    assert dispatcher.pending == 0


def test_inline_dispatcher_swallows_failures():
    def boom():
        raise RuntimeError("store down")

    dispatcher = InlineDispatcher()

    assert dispatcher.submit("bad", boom) is True
    assert dispatcher.stats().failed == 1


def test_submit_after_shutdown_is_dropped_not_raised():
    done = []
    dispatcher = UpdateDispatcher(max_workers=1, max_pending=8)
    dispatcher.shutdown()

    assert dispatcher.submit("late", done.append, 1) is False
    assert done == []
    assert dispatcher.stats().dropped == 1
    assert dispatcher.pending == 0
