"""Tests for logging utilities."""

import logging
from io import StringIO

from quantum_sim.circuit import QuantumCircuit
from quantum_sim.logging import (
    configure_logging,
    get_logger,
    set_log_level,
)


def test_get_logger_returns_namespaced_logger():
    """Loggers live under the package namespace."""
    logger = get_logger("test_module")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "quantum_sim.test_module"


def test_get_logger_keeps_package_names():
    """Module names already inside the package are not prefixed twice."""
    assert get_logger("quantum_sim.circuit.core").name == "quantum_sim.circuit.core"
    assert get_logger().name == "quantum_sim"


def test_get_logger_caching():
    """Test that get_logger caches loggers."""
    logger1 = get_logger("test_module")
    stream_handlers = [h for h in logger1.handlers if type(h) is logging.StreamHandler]
    logger2 = get_logger("test_module")
    assert logger1 is logger2
    assert len(stream_handlers) == 1
    assert [h for h in logger2.handlers if type(h) is logging.StreamHandler] == stream_handlers


def test_get_logger_different_modules():
    """Test that different modules get different loggers."""
    logger1 = get_logger("module1")
    logger2 = get_logger("module2")
    assert logger1 is not logger2
    assert logger1.name != logger2.name


def test_logger_output_format():
    """Messages use the [LEVEL] name: message format."""
    stream = StringIO()
    try:
        configure_logging(level=logging.INFO, stream=stream)
        logger = get_logger("test_module")
        logger.info("Test message")

        output = stream.getvalue()
        assert "[INFO] quantum_sim.test_module: Test message" in output
    finally:
        configure_logging(level=logging.WARNING)


def test_set_log_level():
    """Test that set_log_level updates logger levels."""
    logger = get_logger("test_module")

    set_log_level(logging.INFO)
    assert logger.level == logging.INFO
    assert all(h.level == logging.INFO for h in logger.handlers)

    set_log_level(logging.WARNING)
    assert logger.level == logging.WARNING


def test_set_log_level_string():
    """Test that set_log_level accepts string levels."""
    logger = get_logger("test_module")

    set_log_level("DEBUG")
    assert logger.level == logging.DEBUG

    set_log_level("error")
    assert logger.level == logging.ERROR

    set_log_level(logging.WARNING)


def test_new_loggers_inherit_level():
    """Loggers created after set_log_level pick up the new level."""
    set_log_level(logging.DEBUG)
    try:
        assert get_logger("created_after_level_change").level == logging.DEBUG
    finally:
        set_log_level(logging.WARNING)


def test_circuit_run_logs_at_debug():
    """Running a circuit emits a debug record on the circuit logger."""
    stream = StringIO()
    try:
        get_logger("quantum_sim.circuit.core")
        configure_logging(level=logging.DEBUG, stream=stream)
        QuantumCircuit(2).h(0).cx(0, 1).run()
        assert "Running 2 operation(s) on 2 qubit(s)" in stream.getvalue()
    finally:
        configure_logging(level=logging.WARNING)


def test_sampling_is_quiet_by_default():
    """Info records are suppressed at the default WARNING level."""
    stream = StringIO()
    try:
        configure_logging(level=logging.WARNING, stream=stream)
        QuantumCircuit(1).h(0).sample(5)
        assert stream.getvalue() == ""
    finally:
        configure_logging(level=logging.WARNING)


def test_logger_does_not_propagate():
    """Test that loggers don't propagate to root logger."""
    logger = get_logger("test_module")
    assert logger.propagate is False
