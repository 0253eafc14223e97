"""Tests for progress reporting."""

from comfortkit.progress import ProgressReporter


class TestProgressReporter:
    """Tests for ProgressReporter."""

    def test_disabled_counts_without_bar(self):
        """A disabled reporter still counts steps."""
        reporter = ProgressReporter(total=10, desc="test", disable=True)
        reporter.update(3)
        reporter.update()
        assert reporter.current == 4
        assert reporter._bar is None
        reporter.close()

    def test_tqdm_bar(self):
        """An enabled reporter drives a tqdm bar."""
        reporter = ProgressReporter(total=5, desc="two_nodes")
        assert reporter._bar is not None
        reporter.update(2)
        assert reporter._bar.n == 2
        reporter.set_description("SET")
        assert reporter.desc == "SET"
        reporter.close()

    def test_update_after_close_ignored(self):
        """Updates after close are dropped."""
        reporter = ProgressReporter(total=5, disable=True)
        reporter.close()
        reporter.update(1)
        reporter.close()
        assert reporter.current == 0
