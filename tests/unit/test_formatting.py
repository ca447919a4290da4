"""Tests for output flags, line rendering and Logger."""

import inspect
import os
from datetime import datetime, timedelta, timezone

import pytest

from logtree.adapters.writers import MemoryWriter
from logtree.core.errors import InvalidFlagError, LogConfigError
from logtree.core.formatting import LogFlag, format_line, parse_flags
from logtree.core.logger import Logger
from tests.helpers import FailingWriter

pytestmark = [pytest.mark.core, pytest.mark.tier(0)]

NOW = datetime(2026, 10, 18, 9, 5, 7, 123456)


class TestParseFlags:
    """Tests for parse_flags()."""

    @pytest.mark.tra("Core.Flags.Parse")
    def test_parses_pipe_separated_tokens(self) -> None:
        """Tokens separated by | are combined."""
        assert parse_flags("date|time|shortfile") == (
            LogFlag.DATE | LogFlag.TIME | LogFlag.SHORTFILE
        )

    @pytest.mark.tra("Core.Flags.Parse.CommaAndCase")
    def test_accepts_commas_spaces_and_any_case(self) -> None:
        """Commas, surrounding spaces and upper case are accepted."""
        assert parse_flags(" UTC , Microseconds ") == LogFlag.UTC | LogFlag.MICROSECONDS

    @pytest.mark.tra("Core.Flags.Parse.Std")
    def test_std_is_date_and_time(self) -> None:
        """The std preset expands to date and time."""
        assert parse_flags("std") == LogFlag.DATE | LogFlag.TIME
        assert LogFlag.STD == LogFlag.DATE | LogFlag.TIME

    @pytest.mark.tra("Core.Flags.Parse.Empty")
    def test_empty_expression_is_no_flags(self) -> None:
        """An empty expression disables all header fields."""
        assert parse_flags("") == LogFlag.NONE

    @pytest.mark.tra("Core.Flags.Parse.Unknown")
    def test_unknown_token_raises(self) -> None:
        """Unrecognised tokens raise InvalidFlagError, a LogConfigError."""
        with pytest.raises(InvalidFlagError, match="colour") as excinfo:
            parse_flags("date|colour")

        assert excinfo.value.token == "colour"
        assert isinstance(excinfo.value, LogConfigError)


class TestFormatLine:
    """Tests for format_line()."""

    @pytest.mark.tra("Core.Format.Plain")
    def test_no_flags_is_prefix_and_message(self) -> None:
        """Without flags only the prefix and message are written."""
        assert format_line("[INFO] ", LogFlag.NONE, "hello", NOW) == "[INFO] hello\n"

    @pytest.mark.tra("Core.Format.Std")
    def test_std_flags_write_date_and_time(self) -> None:
        """Date and time use YYYY/MM/DD HH:MM:SS."""
        line = format_line("", LogFlag.STD, "hello", NOW)

        assert line == "2026/10/18 09:05:07 hello\n"

    @pytest.mark.tra("Core.Format.Microseconds")
    def test_microseconds_imply_time(self) -> None:
        """Microseconds are appended to the time, which is shown even without TIME."""
        line = format_line("", LogFlag.MICROSECONDS, "hello", NOW)

        assert line == "09:05:07.123456 hello\n"

    @pytest.mark.tra("Core.Format.UTC")
    def test_utc_converts_aware_timestamps(self) -> None:
        """UTC renders the timestamp in UTC."""
        local = NOW.replace(tzinfo=timezone(timedelta(hours=2)))

        line = format_line("", LogFlag.TIME | LogFlag.UTC, "hello", local)

        assert line == "07:05:07 hello\n"

    @pytest.mark.tra("Core.Format.Files")
    def test_shortfile_wins_over_longfile(self) -> None:
        """Short file names are used when both file flags are set."""
        caller = (os.path.join("src", "app", "service.py"), 42)

        long_line = format_line("", LogFlag.LONGFILE, "x", NOW, caller)
        short_line = format_line("", LogFlag.LONGFILE | LogFlag.SHORTFILE, "x", NOW, caller)

        assert long_line == f"{caller[0]}:42: x\n"
        assert short_line == "service.py:42: x\n"

    @pytest.mark.tra("Core.Format.Newline")
    def test_existing_newline_is_not_doubled(self) -> None:
        """A message already ending in a newline gets no second one."""
        assert format_line("", LogFlag.NONE, "done\n", NOW) == "done\n"


class TestLogger:
    """Tests for Logger."""

    @pytest.mark.tra("Core.Logger.Print")
    def test_print_joins_values_with_spaces(self) -> None:
        """print() writes the space separated str() of its arguments."""
        sink = MemoryWriter()
        log = Logger(sink, prefix="[DEBUG] ", flags=LogFlag.NONE)

        log.print("answer", 42, None)

        assert sink.payloads == [b"[DEBUG] answer 42 None\n"]

    @pytest.mark.tra("Core.Logger.Printf")
    def test_printf_uses_percent_formatting(self) -> None:
        """printf() applies % formatting."""
        sink = MemoryWriter()
        log = Logger(sink, flags=LogFlag.NONE)

        log.printf("%s=%d", "retries", 3)
        log.printf("100%")

        assert sink.payloads == [b"retries=3\n", b"100%\n"]

    @pytest.mark.tra("Core.Logger.Caller")
    def test_shortfile_reports_calling_line(self) -> None:
        """The file flags point at the line that called print()."""
        sink = MemoryWriter()
        log = Logger(sink, flags=LogFlag.SHORTFILE)

        expected_line = inspect.currentframe().f_lineno + 1
        log.print("here")

        assert sink.payloads == [f"test_formatting.py:{expected_line}: here\n".encode()]

    @pytest.mark.tra("Core.Logger.Errors")
    def test_write_errors_propagate(self) -> None:
        """Logger methods raise the writer's OSError."""
        log = Logger(FailingWriter())

        with pytest.raises(OSError):
            log.print("lost")