"""
Unit tests for the textops error hierarchy.
"""

from textops.utils.errors import (
    ConfigError,
    ContractViolation,
    PromptIOError,
    TextOpsError,
)


class TestMessages:
    """Tests for error message formatting."""

    def test_plain_message(self):
        """Without an operation the message is used as-is."""
        assert str(TextOpsError("boom")) == "boom"

    def test_operation_prefix(self):
        """The operation name prefixes the message."""
        error = ContractViolation("bad size", operation="split_by_len")
        assert str(error) == "[split_by_len] bad size"
        assert error.message == "bad size"
        assert error.operation == "split_by_len"

    def test_config_key(self):
        """ConfigError reports the offending key."""
        error = ConfigError("must be positive", key="password_max_len")
        assert error.key == "password_max_len"
        assert str(error) == "[password_max_len] must be positive"


class TestHierarchy:
    """Tests for the exception base classes."""

    def test_contract_violation_is_value_error(self):
        """Contract violations can be caught as ValueError."""
        assert issubclass(ContractViolation, ValueError)
        assert issubclass(ContractViolation, TextOpsError)

    def test_prompt_io_error_is_os_error(self):
        """Prompt failures can be caught as OSError."""
        assert issubclass(PromptIOError, OSError)
        assert issubclass(PromptIOError, TextOpsError)

    def test_config_error(self):
        """ConfigError is a TextOpsError."""
        assert issubclass(ConfigError, TextOpsError)
