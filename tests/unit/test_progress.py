from __future__ import annotations

from unittest.mock import Mock, patch

from specflow.services.progress import ProgressTracker, is_tty_enabled


def test_is_tty_enabled_returns_stdout_isatty():
    with patch('sys.stdout.isatty', return_value=True):
        assert is_tty_enabled() is True

    with patch('sys.stdout.isatty', return_value=False):
        assert is_tty_enabled() is False


class TestProgressTracker:
    """Test cases for ProgressTracker class."""

    def test_init_with_tty_enabled(self):
        with patch('specflow.services.progress.is_tty_enabled', return_value=True), \
             patch('specflow.services.progress.tqdm') as mock_tqdm:

            tracker = ProgressTracker(5, description="Writing")

            assert tracker.total_journeys == 5
            assert tracker.current_journey == 0
            assert tracker.enabled is True
            mock_tqdm.assert_called_once_with(
                total=5,
                desc="Writing",
                unit="journey",
                disable=False,
                leave=False,
                position=0,
                ncols=80,
                ascii=True,
            )

    def test_init_with_tty_disabled(self):
        with patch('specflow.services.progress.is_tty_enabled', return_value=False):
            tracker = ProgressTracker(5)

            assert tracker.enabled is False
            assert tracker.pbar is None

    def test_journey_lifecycle_updates_bar(self):
        mock_pbar = Mock()
        with patch('specflow.services.progress.is_tty_enabled', return_value=True), \
             patch('specflow.services.progress.tqdm', return_value=mock_pbar):

            with ProgressTracker(2, description="Writing") as tracker:
                tracker.start_journey("J-LOGIN")
                mock_pbar.set_description.assert_called_with("Writing (J-LOGIN)")
                tracker.finish_journey()
                mock_pbar.update.assert_called_once_with(1)
                mock_pbar.set_description.assert_called_with("Writing")

            assert tracker.current_journey == 1
            mock_pbar.close.assert_called_once()
            assert tracker.pbar is None

    def test_disabled_tracker_is_noop(self):
        with patch('specflow.services.progress.is_tty_enabled', return_value=False):
            with ProgressTracker(1) as tracker:
                tracker.start_journey("J-LOGIN")
                tracker.finish_journey()
            assert tracker.current_journey == 1
