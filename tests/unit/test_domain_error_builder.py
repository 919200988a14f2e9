"""Unit tests for Builder (namespace registry).

Tests cover:
- Fallback error selection and namespace stamping
- new_error()/copy_error() namespace forcing and registration
- Fallback collision (raises, logs, leaves registry untouched)
- get() resolution, registry introspection
- Structured logging calls

Architecture:
- Unit tests with a mocked LoggerProtocol
- Real ConsoleAdapter output captured with capsys where context matters
"""

import json
from unittest.mock import ANY, Mock, patch

import pytest
import structlog

from errx import (
    DUPLICATE_FALLBACK_ERROR,
    Builder,
    FallbackCollisionError,
    add_metadata,
    fallback_error,
    internal_error,
    new_error,
    with_namespace,
)
from errx.infrastructure.logging import ConsoleAdapter


@pytest.mark.unit
class TestBuilderConstruction:
    """Test Builder construction."""

    def test_default_fallback_is_namespaced_internal_error(self, mock_logger):
        """Test the default fallback is internal_error() in the builder namespace."""
        builder = Builder("myapp", logger=mock_logger)

        assert builder.namespace == "myapp"
        assert builder.fallback_error.code == "ERROR"
        assert builder.fallback_error.namespace == "myapp"
        assert str(builder.fallback_error) == "myapp: [ERROR] Internal Error"

    def test_custom_fallback_is_copied_into_namespace(self, mock_logger):
        """Test a supplied fallback is copied with the builder namespace."""
        custom = new_error("500", "Internal", add_metadata("httpStatus", 500))

        builder = Builder("ns", fallback_error(custom), logger=mock_logger)

        assert builder.fallback_error.code == "500"
        assert builder.fallback_error.namespace == "ns"
        assert builder.fallback_error.metadata["httpStatus"] == 500
        assert custom.namespace == ""

    def test_starts_empty(self, mock_logger):
        """Test a new builder has no registered errors."""
        builder = Builder("ns", logger=mock_logger)

        assert len(builder) == 0
        assert builder.codes() == ()

    def test_uses_container_logger_by_default(self):
        """Test the container logger is bound with component and namespace."""
        container_logger = Mock()
        with patch(
            "errx.domain.errors.builder.get_logger", return_value=container_logger
        ):
            builder = Builder("ns")

        builder.new_error("E1", "msg")

        container_logger.bind.assert_called_once_with(
            component="errx.builder", namespace="ns"
        )
        container_logger.bind.return_value.debug.assert_called_once()
        container_logger.debug.assert_not_called()

    def test_injected_logger_is_used_as_is(self, mock_logger):
        """Test an injected logger is not rebound."""
        builder = Builder("ns", logger=mock_logger)

        builder.new_error("E1", "msg")

        mock_logger.bind.assert_not_called()
        mock_logger.debug.assert_called_once()

    def test_default_logger_output_carries_bound_context(self, capsys):
        """Test registrations are logged with component and namespace."""
        with patch(
            "errx.domain.errors.builder.get_logger",
            return_value=ConsoleAdapter(use_json=True, level="DEBUG"),
        ):
            builder = Builder("billing")

        builder.new_error("E404", "Not found")

        [line] = capsys.readouterr().out.splitlines()
        record = json.loads(line)
        assert record["event"] == "Error registered"
        assert record["component"] == "errx.builder"
        assert record["namespace"] == "billing"
        assert record["code"] == "E404"

    @pytest.mark.usefixtures("fresh_container")
    def test_host_structlog_configuration_is_untouched(self):
        """Test building and logging never reconfigures structlog globally."""
        structlog.configure(processors=[structlog.processors.KeyValueRenderer()])
        try:
            before = structlog.get_config()

            builder = Builder("billing")
            builder.new_error("E404", "Not found")
            with pytest.raises(FallbackCollisionError):
                builder.new_error("ERROR", "anything")

            after = structlog.get_config()
            assert after["processors"] == before["processors"]
            assert after["logger_factory"] is before["logger_factory"]
            assert after["wrapper_class"] is before["wrapper_class"]
        finally:
            structlog.reset_defaults()


@pytest.mark.unit
class TestBuilderNewError:
    """Test Builder.new_error()."""

    def test_new_error_registers_in_namespace(self, mock_logger):
        """Test created errors carry the namespace and are registered."""
        builder = Builder("myapp", logger=mock_logger)

        err = builder.new_error("E404", "Not found", add_metadata("httpStatus", 404))

        assert err.namespace == "myapp"
        assert str(err) == "myapp: [E404] Not found"
        assert err.metadata["httpStatus"] == 404
        assert builder.get("E404") is err
        assert "E404" in builder

    def test_namespace_option_is_overridden(self, mock_logger):
        """Test a caller-supplied namespace is forced back to the builder's."""
        builder = Builder("myapp", logger=mock_logger)

        err = builder.new_error("E1", "msg", with_namespace("other"))

        assert err.namespace == "myapp"

    def test_reregistration_overwrites(self, mock_logger):
        """Test registering a code again replaces the earlier error."""
        builder = Builder("myapp", logger=mock_logger)
        builder.new_error("E1", "first")

        second = builder.new_error("E1", "second")

        assert builder.get("E1") is second
        assert len(builder) == 1
        mock_logger.debug.assert_called_with(
            "Error registered", namespace="myapp", code="E1", overwritten=True
        )

    def test_registration_is_logged(self, mock_logger):
        """Test registration logs at debug level."""
        builder = Builder("myapp", logger=mock_logger)

        builder.new_error("E1", "msg")

        mock_logger.debug.assert_called_once_with(
            "Error registered", namespace="myapp", code="E1", overwritten=False
        )

    def test_codes_in_registration_order(self, mock_logger):
        """Test codes() lists codes in registration order."""
        builder = Builder("myapp", logger=mock_logger)
        builder.new_error("B", "b")
        builder.new_error("A", "a")

        assert builder.codes() == ("B", "A")


@pytest.mark.unit
class TestBuilderCollision:
    """Test fallback collision handling."""

    def test_new_error_with_fallback_code_raises(self, mock_logger):
        """Test registering the fallback code aborts the call."""
        builder = Builder(
            "ns", fallback_error(new_error("500", "Internal")), logger=mock_logger
        )

        with pytest.raises(FallbackCollisionError) as exc_info:
            builder.new_error("500", "anything")

        assert exc_info.value.error == DUPLICATE_FALLBACK_ERROR
        assert exc_info.value.namespace == "ns"
        assert exc_info.value.code == "500"
        assert len(builder) == 0
        assert "500" not in builder

    def test_default_fallback_code_collides(self, mock_logger):
        """Test the default fallback code is reserved too."""
        builder = Builder("ns", logger=mock_logger)

        with pytest.raises(FallbackCollisionError):
            builder.new_error("ERROR", "anything")

    def test_copy_error_with_fallback_code_raises(self, mock_logger):
        """Test copying an error with the fallback code aborts the call."""
        builder = Builder("ns", logger=mock_logger)

        with pytest.raises(FallbackCollisionError):
            builder.copy_error(internal_error())

        assert builder.codes() == ()

    def test_collision_keeps_existing_registry(self, mock_logger):
        """Test a collision does not disturb earlier registrations."""
        builder = Builder("ns", logger=mock_logger)
        existing = builder.new_error("E1", "msg")

        with pytest.raises(FallbackCollisionError):
            builder.new_error("ERROR", "anything")

        assert builder.get("E1") is existing
        assert len(builder) == 1

    def test_collision_is_logged_as_critical(self, mock_logger):
        """Test the collision is logged before raising."""
        builder = Builder("ns", logger=mock_logger)

        with pytest.raises(FallbackCollisionError):
            builder.new_error("ERROR", "anything")

        mock_logger.critical.assert_called_once_with(
            "Error code collides with fallback error",
            error=ANY,
            namespace="ns",
            code="ERROR",
        )

    def test_collision_message(self):
        """Test the exception text is the collision error display string."""
        exc = FallbackCollisionError(namespace="ns", code="500")

        assert str(exc) == (
            "errx: [ERR_1] Cannot create new Error that has same code with "
            "Fallback Error"
        )
        assert exc.error.metadata["builder_namespace"] == "ns"
        assert exc.error.metadata["code"] == "500"


@pytest.mark.unit
class TestBuilderCopyError:
    """Test Builder.copy_error()."""

    def test_copy_error_forces_namespace_and_registers(self, mock_logger):
        """Test copies are stamped with the builder namespace and registered."""
        builder = Builder("myapp", logger=mock_logger)
        original = new_error("E1", "msg", with_namespace("lib"), add_metadata("k", 1))

        copied = builder.copy_error(original, with_namespace("other"))

        assert copied.namespace == "myapp"
        assert copied.metadata["k"] == 1
        assert builder.get("E1") is copied
        assert original.namespace == "lib"

    def test_copy_error_drops_traces(self, mock_logger):
        """Test copied errors start without traces."""
        builder = Builder("myapp", logger=mock_logger)

        copied = builder.copy_error(new_error("E1", "msg").trace())

        assert copied.traces == ()


@pytest.mark.unit
class TestBuilderGet:
    """Test Builder.get()."""

    def test_get_unknown_returns_fallback(self, mock_logger):
        """Test unregistered codes resolve to the fallback error."""
        custom = new_error("500", "Internal")
        builder = Builder("ns", fallback_error(custom), logger=mock_logger)

        err = builder.get("UNKNOWN")

        assert err is builder.fallback_error
        assert err == custom.copy(with_namespace("ns"))

    def test_get_does_not_register(self, mock_logger):
        """Test get() never mutates the registry."""
        builder = Builder("ns", logger=mock_logger)

        builder.get("UNKNOWN")

        assert len(builder) == 0

    def test_builders_are_independent(self, mock_logger):
        """Test registries are not shared between builders."""
        first = Builder("a", logger=mock_logger)
        second = Builder("b", logger=mock_logger)

        first.new_error("E1", "msg")

        assert "E1" in first
        assert "E1" not in second
        assert second.get("E1") is second.fallback_error
