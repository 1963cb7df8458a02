"""Tests for concurrent registry mutation and dispatch"""

import io
import re
import threading

from micrologging import LogLevel, Registry
from micrologging.core.log_entry import LogEntry
from micrologging.writers import BaseWriter


LINE_RE = re.compile(r"^\(\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\.\d{3}\) \[INFO \] \(t\d+\) message \d+$")


class CollectingWriter(BaseWriter):
    def __init__(self):
        self.lines = []
        self._lock = threading.Lock()

    def write(self, entry: LogEntry) -> None:
        with self._lock:
            self.lines.append(entry.line)


def run_threads(targets):
    threads = [threading.Thread(target=t) for t in targets]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=30)
    assert not any(thread.is_alive() for thread in threads)


class TestConcurrentAccess:
    """Test add_output and set_level racing with dispatch."""

    def test_add_output_during_dispatch(self):
        adders, dispatchers = 4, 4
        per_adder, per_dispatcher = 50, 200

        initial = CollectingWriter()
        registry = Registry(writers=[initial])
        added = []
        added_lock = threading.Lock()
        barrier = threading.Barrier(adders + dispatchers)
        errors = []

        def add():
            barrier.wait()
            for _ in range(per_adder):
                writer = CollectingWriter()
                registry.add_output(writer)
                with added_lock:
                    added.append(writer)

        def dispatch(index):
            barrier.wait()
            try:
                for i in range(per_dispatcher):
                    registry.dispatch(LogLevel.INFO, "message %d", i, name=f"t{index}")
            except Exception as e:
                errors.append(e)

        run_threads(
            [add] * adders
            + [lambda index=index: dispatch(index) for index in range(dispatchers)]
        )

        total = dispatchers * per_dispatcher
        assert errors == []
        assert len(registry.outputs) == 1 + adders * per_adder
        assert set(registry.outputs) == {initial, *added}
        assert len(initial.lines) == total
        assert len(set(initial.lines)) == total
        for writer in added:
            assert len(writer.lines) <= total
            assert len(set(writer.lines)) == len(writer.lines)

    def test_writers_present_before_dispatch_get_every_line(self):
        writers = [CollectingWriter() for _ in range(5)]
        registry = Registry(writers=writers)
        barrier = threading.Barrier(6)

        def dispatch(index):
            barrier.wait()
            for i in range(100):
                registry.dispatch(LogLevel.INFO, "message %d", i, name=f"t{index}")

        def churn():
            barrier.wait()
            for _ in range(100):
                registry.add_output(CollectingWriter())
                registry.set_level(LogLevel.INFO)

        run_threads([lambda index=index: dispatch(index) for index in range(5)] + [churn])

        for writer in writers:
            assert len(writer.lines) == 500
            assert all(LINE_RE.match(line) for line in writer.lines)

    def test_set_level_during_dispatch(self):
        writer = CollectingWriter()
        registry = Registry(writers=[writer])
        stop = threading.Event()

        def toggle():
            while not stop.is_set():
                registry.set_level(LogLevel.ERROR)
                registry.set_level(LogLevel.INFO)

        def dispatch():
            for i in range(500):
                registry.dispatch(LogLevel.ERROR, "message %d", i, name="t0")
            stop.set()

        run_threads([toggle, dispatch])

        assert len(writer.lines) == 500
        assert registry.level in (LogLevel.ERROR, LogLevel.INFO)

    def test_lines_never_interleave(self):
        stream = io.StringIO()
        registry = Registry(writers=[stream])

        def dispatch(index):
            for i in range(100):
                registry.dispatch(LogLevel.INFO, "message %d", i, name=f"t{index}")

        run_threads([lambda index=index: dispatch(index) for index in range(8)])

        lines = stream.getvalue().splitlines()
        assert len(lines) == 800
        assert all(LINE_RE.match(line) for line in lines)

