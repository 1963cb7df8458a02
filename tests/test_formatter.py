"""Tests for message interpolation and line formatting"""

from datetime import datetime

from micrologging import LogEntry, LogLevel
from micrologging.formatters import LineFormatter, render_message


FIXED_TIME = datetime(2024, 1, 31, 12, 34, 56, 789123)


class BadStr:
    def __str__(self):
        raise RuntimeError("bad str")


class BadStrAndRepr(BadStr):
    def __repr__(self):
        raise RuntimeError("bad repr")


class TestRenderMessage:
    """Test printf-style interpolation."""

    def test_no_args_is_verbatim(self):
        assert render_message("100% done", ()) == "100% done"
        assert render_message("%s %d", ()) == "%s %d"

    def test_positional_args(self):
        assert render_message("connect to %s:%d", ("host1", 80)) == "connect to host1:80"

    def test_mapping_arg(self):
        assert render_message("user %(user)s", ({"user": "bob"},)) == "user bob"

    def test_empty_mapping_is_positional(self):
        assert render_message("%s", ({},)) == "{}"

    def test_non_string_format(self):
        assert render_message(42, ()) == "42"

    def test_missing_args_render_inline(self):
        msg = render_message("%s and %s", ("a",))
        assert msg.startswith("%s and %s")
        assert "[FORMAT ERROR:" in msg

    def test_extra_args_render_inline(self):
        msg = render_message("only %s", ("a", "b"))
        assert "[FORMAT ERROR:" in msg
        assert "'b'" in msg

    def test_wrong_type_renders_inline(self):
        assert "[FORMAT ERROR:" in render_message("%d", ("x",))

    def test_missing_key_renders_inline(self):
        assert "[FORMAT ERROR:" in render_message("%(a)s", ({"b": 1},))

    def test_overflow_renders_inline(self):
        msg = render_message("count %d", (float("inf"),))
        assert msg.startswith("count %d [FORMAT ERROR: OverflowError")
        assert "inf" in msg

    def test_char_out_of_range_renders_inline(self):
        assert "[FORMAT ERROR: OverflowError" in render_message("char %c", (10 ** 10,))

    def test_failing_str_renders_inline(self):
        msg = render_message("obj %s", (BadStr(),))
        assert "[FORMAT ERROR: RuntimeError: bad str]" in msg

    def test_failing_repr_falls_back_to_type_name(self):
        msg = render_message("obj %s", (BadStrAndRepr(),))
        assert msg.endswith("(<BadStrAndRepr>)")


class TestLineFormatter:
    """Test decorated line layout."""

    def test_named_line(self):
        entry = LogEntry(
            level=LogLevel.WARN,
            message="hello",
            logger_name="db",
            timestamp=FIXED_TIME,
        )
        assert LineFormatter().format(entry) == "(2024-01-31 12:34:56.789) [WARN ] (db) hello"

    def test_unnamed_line_has_no_name_segment(self):
        entry = LogEntry(level=LogLevel.ERROR, message="boom", timestamp=FIXED_TIME)
        assert LineFormatter().format(entry) == "(2024-01-31 12:34:56.789) [ERROR] boom"

    def test_line_is_stripped(self):
        entry = LogEntry(level=LogLevel.INFO, message="  padded \n", timestamp=FIXED_TIME)
        assert LineFormatter().format(entry) == "(2024-01-31 12:34:56.789) [INFO ]   padded"

    def test_empty_message(self):
        entry = LogEntry(level=LogLevel.INFO, message="", timestamp=FIXED_TIME)
        assert LineFormatter().format(entry) == "(2024-01-31 12:34:56.789) [INFO ]"

    def test_unknown_level(self):
        entry = LogEntry(level=9, message="odd", timestamp=FIXED_TIME)
        assert "[?????]" in LineFormatter().format(entry)

    def test_custom_timestamp_format(self):
        entry = LogEntry(level=LogLevel.INFO, message="x", timestamp=FIXED_TIME)
        formatter = LineFormatter(timestamp_format="%H:%M:%S")
        assert formatter(entry) == "(12:34:56) [INFO ] x"

    def test_repr(self):
        assert "LineFormatter" in repr(LineFormatter())


class TestLogEntry:
    """Test log entry structure."""

    def test_create_entry(self):
        entry = LogEntry(level=LogLevel.INFO, message="Test message")
        assert entry.level == LogLevel.INFO
        assert entry.message == "Test message"
        assert entry.logger_name == ""
        assert entry.line == ""

    def test_message_coerced_to_str(self):
        entry = LogEntry(level=LogLevel.INFO, message=123)
        assert entry.message == "123"

    def test_to_dict(self):
        entry = LogEntry(level=LogLevel.DEBUG, message="Test", timestamp=FIXED_TIME)
        data = entry.to_dict()
        assert data["level"] == 1
        assert data["message"] == "Test"
        assert data["timestamp"] == FIXED_TIME.isoformat()
