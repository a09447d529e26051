"""
Tests for the logging configuration and builder logging.
"""

import logging
import subprocess
import sys
import textwrap
from unittest.mock import patch

import pytest

from fluentquery import logging_config
from fluentquery.logging_config import (
    ContextFilter,
    get_log_format,
    get_log_level,
    get_logger,
    get_logging_config,
)
from fluentquery.query_builder import QueryBuilder, SelectAnchorError
from fluentquery.query_builder import builder as builder_module


class TestLoggingConfig:
    """Test cases for environment driven logging configuration."""

    def test_default_level(self, monkeypatch):
        monkeypatch.delenv("FLUENTQUERY_LOG_LEVEL", raising=False)

        assert get_log_level() == "INFO"

    def test_level_from_env(self, monkeypatch):
        monkeypatch.setenv("FLUENTQUERY_LOG_LEVEL", "debug")

        assert get_log_level() == "DEBUG"

    def test_production_format_includes_location(self, monkeypatch):
        monkeypatch.setenv("FLUENTQUERY_ENV", "production")

        assert "%(pathname)s:%(lineno)d" in get_log_format()

    def test_development_format(self, monkeypatch):
        monkeypatch.delenv("FLUENTQUERY_ENV", raising=False)

        assert "%(pathname)s" not in get_log_format()

    def test_config_without_file(self, monkeypatch):
        monkeypatch.delenv("FLUENTQUERY_LOG_FILE", raising=False)

        config = get_logging_config()

        assert "file" not in config["handlers"]
        assert "handlers" not in config["loggers"]["fluentquery"]
        assert config["loggers"]["fluentquery"].get("propagate", True)

    def test_config_with_file(self, monkeypatch, tmp_path):
        log_file = tmp_path / "fluentquery.log"
        monkeypatch.setenv("FLUENTQUERY_LOG_FILE", str(log_file))

        config = get_logging_config()

        assert config["handlers"]["file"]["filename"] == str(log_file)
        assert config["handlers"]["file"]["backupCount"] == 5
        assert config["loggers"]["fluentquery"]["handlers"] == ["file"]

    def test_config_level_from_env(self, monkeypatch):
        monkeypatch.setenv("FLUENTQUERY_LOG_LEVEL", "warning")

        config = get_logging_config()

        assert config["loggers"]["fluentquery"]["level"] == "WARNING"
        assert config["handlers"]["console"]["level"] == "WARNING"

    def test_setup_logging_applies_config(self, monkeypatch):
        monkeypatch.setenv("FLUENTQUERY_LOG_LEVEL", "WARNING")
        monkeypatch.delenv("FLUENTQUERY_LOG_FILE", raising=False)

        with patch.object(logging_config.logging.config, "dictConfig") as mock_dict_config:
            logging_config.setup_logging()

        mock_dict_config.assert_called_once()
        config = mock_dict_config.call_args.args[0]
        assert config["loggers"]["fluentquery"]["level"] == "WARNING"


class TestImportSideEffects:
    """Importing the package must leave the host application's logging alone."""

    def test_import_leaves_root_logging_unconfigured(self, tmp_path):
        app_log = tmp_path / "app.log"
        script = textwrap.dedent(
            f"""
            import logging
            import fluentquery

            root = logging.getLogger()
            assert not root.handlers, root.handlers
            assert logging.getLogger("fluentquery").propagate

            logging.basicConfig(level=logging.DEBUG, filename={str(app_log)!r})
            logging.getLogger("app").debug("host message")
            fluentquery.QueryBuilder().select("A").build()
            logging.shutdown()
            """
        )

        result = subprocess.run(
            [sys.executable, "-c", script], capture_output=True, text=True
        )

        assert result.returncode == 0, result.stderr
        contents = app_log.read_text()
        assert "host message" in contents
        assert "Built query: SELECT A" in contents


class TestGetLogger:
    """Test cases for logger naming and context."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("fluentquery.query_builder", "fluentquery.query_builder"),
            ("__main__", "fluentquery.main"),
            ("reports", "fluentquery.reports"),
        ],
    )
    def test_names_are_namespaced(self, name, expected):
        assert get_logger(name).name == expected

    def test_context_filter_added(self):
        logger = get_logger("context.test", context={"query_id": "q-1"})

        filters = [f for f in logger.filters if isinstance(f, ContextFilter)]
        assert filters
        assert filters[0].context == {"query_id": "q-1"}

    def test_context_filter_sets_attributes(self):
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)

        assert ContextFilter({"query_id": "q-1"}).filter(record)
        assert record.query_id == "q-1"


class TestBuilderLogging:
    """Test cases for what the builders log."""

    def test_missing_anchor_logged_as_error(self):
        with patch.object(builder_module.logger, "error") as mock_error:
            with pytest.raises(SelectAnchorError):
                QueryBuilder().from_("Table1").prepend_select("Field1")

        mock_error.assert_called_once()
        assert mock_error.call_args.args[1] == "prepend_select"

    def test_dense_rank_rewrite_logged(self):
        with patch.object(builder_module.logger, "debug") as mock_debug:
            QueryBuilder().select("A").from_("T").where("A = 1").paginated_by_dense_rank(10, 1, "A")

        messages = [call.args[0] for call in mock_debug.call_args_list]
        assert any("dense rank" in message for message in messages)
