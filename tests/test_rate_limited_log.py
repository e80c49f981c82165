"""
Tests for rate-limited logging.
"""
import threading
from unittest.mock import MagicMock

from cosmos_signer import _rate_limited_log
from cosmos_signer._rate_limited_log import rate_limited_log, reset_rate_limits


class TestRateLimitedLog:
    """Tests for rate_limited_log."""

    def test_first_message_is_logged(self):
        mock_logger = MagicMock()
        assert rate_limited_log("gas is high", logger_instance=mock_logger) is True
        mock_logger.warning.assert_called_once_with("gas is high")

    def test_repeat_is_suppressed(self):
        mock_logger = MagicMock()
        rate_limited_log("gas is high", logger_instance=mock_logger)
        assert rate_limited_log("gas is high", logger_instance=mock_logger) is False
        assert mock_logger.warning.call_count == 1

    def test_level_and_message_form_the_key(self):
        mock_logger = MagicMock()
        rate_limited_log("same", "info", logger_instance=mock_logger)
        rate_limited_log("same", "error", logger_instance=mock_logger)
        rate_limited_log("other", "info", logger_instance=mock_logger)
        assert mock_logger.info.call_count == 2
        assert mock_logger.error.call_count == 1

    def test_explicit_key_groups_messages(self):
        """Test that messages sharing a key are suppressed together."""
        mock_logger = MagicMock()
        rate_limited_log("gas 100", logger_instance=mock_logger, key="gas")
        rate_limited_log("gas 200", logger_instance=mock_logger, key="gas")
        mock_logger.warning.assert_called_once_with("gas 100")

    def test_zero_interval_never_suppresses(self):
        mock_logger = MagicMock()
        rate_limited_log("tick", interval=0, logger_instance=mock_logger)
        assert rate_limited_log("tick", interval=0, logger_instance=mock_logger) is True
        assert mock_logger.warning.call_count == 2

    def test_expired_entry_is_logged_again(self):
        """Test that an entry past its expiry no longer suppresses the message."""
        mock_logger = MagicMock()
        rate_limited_log("tick", interval=60, logger_instance=mock_logger)
        _rate_limited_log._log_cache["warning:tick"] = _rate_limited_log._log_cache.timer() - 1
        assert rate_limited_log("tick", interval=60, logger_instance=mock_logger) is True
        assert mock_logger.warning.call_count == 2

    def test_unknown_level_falls_back_to_warning(self):
        mock_logger = MagicMock(spec=["warning"])
        rate_limited_log("odd", "verbose", logger_instance=mock_logger)
        mock_logger.warning.assert_called_once_with("odd")

    def test_reset(self):
        mock_logger = MagicMock()
        rate_limited_log("again", logger_instance=mock_logger)
        reset_rate_limits()
        assert rate_limited_log("again", logger_instance=mock_logger) is True

    def test_concurrent_callers_log_once(self):
        mock_logger = MagicMock()
        barrier = threading.Barrier(8)

        def worker():
            barrier.wait()
            rate_limited_log("race", logger_instance=mock_logger)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        assert mock_logger.warning.call_count == 1
