"""Unit tests for logging and metrics helpers."""

import logging

import pytest
import structlog
from prometheus_client import REGISTRY

from graphcore.common.config import LoggingSettings
from graphcore.common.logging import get_logger, setup_logging
from graphcore.common.metrics import record_traversal
from graphcore.graph import Graph, GraphTraversal, PathFinder, StructureAnalyzer


@pytest.mark.unit
class TestLogging:
    """Test cases for structured logging setup."""

    @pytest.mark.parametrize("log_format", ["json", "console"])
    def test_setup_logging(self, log_format):
        """Test both renderers configure without error."""
        setup_logging(LoggingSettings(format=log_format, level="DEBUG"))

        get_logger("graphcore.test").debug("configured", log_format=log_format)

    def test_get_logger_binds_context(self):
        """Test initial context is bound to the logger."""
        logger = get_logger("graphcore.test", graph="routes")

        assert structlog.get_context(logger)["graph"] == "routes"

    def test_default_configuration_uses_stdlib(self):
        """Test loggers go through the standard library by default."""
        assert structlog.is_configured()
        assert isinstance(
            structlog.get_config()["logger_factory"],
            structlog.stdlib.LoggerFactory,
        )

    def test_engine_silent_without_setup(self, capsys):
        """Test algorithms write nothing when logging is not configured."""
        graph = Graph()
        a = graph.add_node("A")
        b = graph.add_node("B")
        graph.add_edge(a, b, 1.0)

        GraphTraversal(graph).dfs(a)
        StructureAnalyzer(graph).is_dag()
        PathFinder(graph).a_star(a, b)

        out, err = capsys.readouterr()
        assert out == ""
        assert err == ""

    def test_debug_records_reach_stdlib(self, caplog):
        """Test engine events are emitted as stdlib records when enabled."""
        graph = Graph()
        a = graph.add_node("A")

        with caplog.at_level(logging.DEBUG, logger="graphcore.graph.traversal"):
            GraphTraversal(graph).dfs(a)

        assert any("DFS complete" in record.getMessage() for record in caplog.records)


@pytest.mark.unit
class TestMetrics:
    """Test cases for Prometheus metrics."""

    @staticmethod
    def _count(operation: str) -> float:
        value = REGISTRY.get_sample_value(
            "graphcore_graph_traversal_nodes_count",
            {"operation": operation},
        )
        return value or 0.0

    def test_record_traversal(self):
        """Test a recorded operation lands in both histograms."""
        before = self._count("unit_test")

        record_traversal("unit_test", 0.002, 7)

        assert self._count("unit_test") == before + 1
        assert REGISTRY.get_sample_value(
            "graphcore_graph_traversal_duration_seconds_count",
            {"operation": "unit_test"},
        ) >= 1

    def test_bfs_is_recorded(self):
        """Test traversals report under their operation label."""
        graph = Graph()
        node = graph.add_node("A")
        before = self._count("bfs")

        GraphTraversal(graph).bfs(node)

        assert self._count("bfs") == before + 1
