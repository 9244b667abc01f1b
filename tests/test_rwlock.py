import threading
import time

from spelltrie.common.rwlock import ReadWriteLock


def test_readers_share_the_lock() -> None:
    lock = ReadWriteLock()
    inside = threading.Barrier(2, timeout=5)

    def _reader() -> None:
        with lock.read():
            inside.wait()

    threads = [threading.Thread(target=_reader) for _ in range(2)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=5)

    assert not any(thread.is_alive() for thread in threads)


def test_writer_waits_for_active_reader() -> None:
    lock = ReadWriteLock()
    events: list[str] = []
    writer_started = threading.Event()

    def _writer() -> None:
        writer_started.set()
        with lock.write():
            events.append("write")

    with lock.read():
        thread = threading.Thread(target=_writer)
        thread.start()
        writer_started.wait(timeout=5)
        thread.join(timeout=0.2)
        events.append("read done")

    thread.join(timeout=5)

    assert events == ["read done", "write"]


def test_write_lock_is_released_after_error() -> None:
    lock = ReadWriteLock()

    try:
        with lock.write():
            raise RuntimeError("boom")
    except RuntimeError:
        pass

    acquired = threading.Event()

    def _reader() -> None:
        with lock.read():
            acquired.set()

    thread = threading.Thread(target=_reader)
    thread.start()
    thread.join(timeout=5)

    assert acquired.is_set()


def test_queued_writer_blocks_new_readers() -> None:
    lock = ReadWriteLock()
    events: list[str] = []

    def _writer() -> None:
        with lock.write():
            events.append("write")

    def _reader() -> None:
        with lock.read():
            events.append("second read")

    lock.acquire_read()
    writer = threading.Thread(target=_writer)
    writer.start()
    deadline = time.monotonic() + 5
    while lock._writers_waiting == 0 and time.monotonic() < deadline:
        time.sleep(0.01)
    assert lock._writers_waiting == 1

    reader = threading.Thread(target=_reader)
    reader.start()
    reader.join(timeout=0.2)
    assert reader.is_alive()
    assert events == []

    lock.release_read()
    writer.join(timeout=5)
    reader.join(timeout=5)

    assert events == ["write", "second read"]
