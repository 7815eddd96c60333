import unittest
from datetime import datetime

from fake_vcs import FakeVcs, FakeVcsError

from header_changes.versioning.clock import FixedClock
from header_changes.versioning.history import resolve_history
from header_changes.versioning.model import FileHistory, VersioningError


CLOCK = FixedClock(datetime(2026, 10, 18, 9, 30))


def _timestamp(year: int) -> str:
    return str(int(datetime(year, 6, 15, 12).timestamp()))


class TestResolveHistory(unittest.TestCase):
    def test_requests_timestamp_log_of_path(self) -> None:
        vcs = FakeVcs()
        resolve_history(vcs, "src/main.go", CLOCK)
        self.assertEqual(vcs.calls, [("log", ["--format=%at", "--", "src/main.go"])])

    def test_no_history_defaults_to_current_year(self) -> None:
        history = resolve_history(FakeVcs(logs={"new.go": ""}), "new.go", CLOCK)
        self.assertEqual(history, FileHistory(creation_year=2026, last_edition_year=2026))

    def test_single_commit_keeps_current_year_as_last_edition(self) -> None:
        vcs = FakeVcs(logs={"a.go": _timestamp(2015) + "\n"})
        history = resolve_history(vcs, "a.go", CLOCK)
        self.assertEqual(history.creation_year, 2015)
        self.assertEqual(history.last_edition_year, 2026)

    def test_two_commits(self) -> None:
        log = f"{_timestamp(2019)}\n{_timestamp(2012)}\n"
        history = resolve_history(FakeVcs(logs={"a.go": log}), "a.go", CLOCK)
        self.assertEqual(history, FileHistory(creation_year=2012, last_edition_year=2019))

    def test_many_commits_use_oldest_and_newest(self) -> None:
        log = "".join(f"{_timestamp(year)}\n" for year in (2021, 2020, 2018, 2009))
        history = resolve_history(FakeVcs(logs={"a.go": log}), "a.go", CLOCK)
        self.assertEqual(history, FileHistory(creation_year=2009, last_edition_year=2021))

    def test_output_without_trailing_newline_drops_last_entry(self) -> None:
        log = f"{_timestamp(2019)}\n{_timestamp(2012)}"
        history = resolve_history(FakeVcs(logs={"a.go": log}), "a.go", CLOCK)
        self.assertEqual(history, FileHistory(creation_year=2019, last_edition_year=2026))

    def test_malformed_oldest_timestamp_fails(self) -> None:
        vcs = FakeVcs(logs={"a.go": "not-a-timestamp\n"})
        with self.assertRaises(VersioningError):
            resolve_history(vcs, "a.go", CLOCK)

    def test_malformed_newest_timestamp_fails(self) -> None:
        vcs = FakeVcs(logs={"a.go": f"abc\n{_timestamp(2012)}\n"})
        with self.assertRaises(VersioningError):
            resolve_history(vcs, "a.go", CLOCK)

    def test_loosely_formatted_timestamps_fail(self) -> None:
        loose = (
            "1_529_064_000",
            " 1529064000",
            "1529064000 ",
            "1529064000\r",
            "\u0661\u0662\u0663",
            "0x5b23",
        )
        for raw in loose:
            with self.subTest(raw=raw):
                vcs = FakeVcs(logs={"a.go": raw + "\n"})
                with self.assertRaises(VersioningError):
                    resolve_history(vcs, "a.go", CLOCK)

    def test_signed_timestamps_are_accepted(self) -> None:
        log = f"+{_timestamp(2019)}\n{_timestamp(2012)}\n"
        history = resolve_history(FakeVcs(logs={"a.go": log}), "a.go", CLOCK)
        self.assertEqual(history, FileHistory(creation_year=2012, last_edition_year=2019))

    def test_timestamp_beyond_calendar_range_fails(self) -> None:
        vcs = FakeVcs(logs={"a.go": "99999999999999\n"})
        with self.assertRaises(VersioningError) as ctx:
            resolve_history(vcs, "a.go", CLOCK)
        self.assertIsInstance(ctx.exception.__cause__, (ValueError, OverflowError, OSError))

    def test_timestamp_beyond_64_bits_fails(self) -> None:
        vcs = FakeVcs(logs={"a.go": str(2 ** 63) + "\n"})
        with self.assertRaises(VersioningError):
            resolve_history(vcs, "a.go", CLOCK)

    def test_log_failure_propagates(self) -> None:
        vcs = FakeVcs()
        vcs.failing.add("log")
        with self.assertRaises(FakeVcsError):
            resolve_history(vcs, "a.go", CLOCK)


if __name__ == "__main__":
    unittest.main()
