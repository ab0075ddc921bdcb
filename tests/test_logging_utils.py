"""Tests for setup_logging() and PackageFilter.

Tests verify that setup_logging() configures a RichHandler on the root
logger, honors the verbose flag, and that only design_patterns records
reach the handler.
"""

import logging

from rich.logging import RichHandler

from design_patterns.logging_utils import PackageFilter, setup_logging


def _make_record(name: str) -> logging.LogRecord:
    return logging.LogRecord(name, logging.INFO, __file__, 1, "message", None, None)


class TestSetupLoggingWithRichHandler:
    """Test setup_logging() function with RichHandler configuration."""

    def test_setup_logging_with_rich_handler_info_level(self):
        """Verify setup_logging configures RichHandler with INFO level by default."""
        setup_logging(verbose=False)

        root_logger = logging.getLogger()
        assert root_logger.level == logging.INFO

        rich_handlers = [h for h in root_logger.handlers if isinstance(h, RichHandler)]
        assert len(rich_handlers) == 1, "RichHandler should be configured"

    def test_setup_logging_with_rich_handler_debug_level(self):
        """Verify setup_logging configures RichHandler with DEBUG level when verbose=True."""
        setup_logging(verbose=True)

        root_logger = logging.getLogger()
        assert root_logger.level == logging.DEBUG

        rich_handlers = [h for h in root_logger.handlers if isinstance(h, RichHandler)]
        assert rich_handlers[0].level == logging.DEBUG

    def test_repeated_setup_does_not_stack_handlers(self):
        """Verify calling setup_logging twice leaves a single RichHandler."""
        setup_logging(verbose=False)
        setup_logging(verbose=True)

        rich_handlers = [h for h in logging.getLogger().handlers if isinstance(h, RichHandler)]
        assert len(rich_handlers) == 1

    def test_handler_filters_foreign_packages(self):
        """Verify the configured handler carries a PackageFilter for design_patterns."""
        setup_logging(verbose=False)

        handler = next(h for h in logging.getLogger().handlers if isinstance(h, RichHandler))
        assert handler.filter(_make_record("design_patterns.fsm.order_fsm"))
        assert not handler.filter(_make_record("urllib3.connectionpool"))


class TestPackageFilter:
    """Test PackageFilter in isolation."""

    def test_allows_listed_package_prefixes(self):
        """Verify records from listed packages pass."""
        package_filter = PackageFilter(["design_patterns", "other"])
        assert package_filter.filter(_make_record("design_patterns"))
        assert package_filter.filter(_make_record("other.module"))

    def test_rejects_unlisted_packages(self):
        """Verify records from other packages are dropped."""
        package_filter = PackageFilter(["design_patterns"])
        assert not package_filter.filter(_make_record("root"))
        assert not package_filter.filter(_make_record("click"))

    def test_rejects_packages_sharing_a_name_prefix(self):
        """Verify a sibling package whose name merely starts with a listed one is dropped."""
        package_filter = PackageFilter(["design_patterns"])
        assert not package_filter.filter(_make_record("design_patterns_extra"))
        assert not package_filter.filter(_make_record("design_patternsx.module"))
        assert package_filter.filter(_make_record("design_patterns.fsm.order_fsm"))
