"""Tests for environment variable expansion utilities."""

import os
from unittest.mock import patch

from abstract_factory.config.utils import expand_env_vars


class TestEnvironmentVariableExpansion:
    """Test environment variable expansion functionality."""

    def test_expand_simple_env_var(self):
        """Test expansion of simple environment variable."""
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            assert expand_env_vars("$TEST_VAR") == "/test/path"

    def test_expand_braced_env_var_with_subpath(self):
        """Test expansion of braced environment variable with subpath."""
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            assert expand_env_vars("${TEST_VAR}/subdir") == "/test/path/subdir"

    def test_expand_default_when_unset(self):
        """Test that the default is used for an unset variable."""
        with patch.dict(os.environ, {}, clear=True):
            assert expand_env_vars("${TEST_VAR:logs}/app.log") == "logs/app.log"

    def test_set_variable_wins_over_default(self):
        """Test that a set variable takes precedence over the default."""
        with patch.dict(os.environ, {"TEST_VAR": "/var/log"}):
            assert expand_env_vars("${TEST_VAR:logs}/app.log") == "/var/log/app.log"

    def test_empty_default(self):
        """Test expansion to an empty default."""
        with patch.dict(os.environ, {}, clear=True):
            assert expand_env_vars("${TEST_VAR:}") == ""

    def test_expand_nonexistent_env_var(self):
        """Test that unset variables without default are left as written."""
        with patch.dict(os.environ, {}, clear=True):
            assert expand_env_vars("$NONEXISTENT_VAR") == "$NONEXISTENT_VAR"

    def test_expand_nested_values(self):
        """Test expansion inside nested dictionaries and lists."""
        with patch.dict(os.environ, {"TEST_VAR": "DEBUG"}):
            config = {
                "logging": {"level": "$TEST_VAR", "max_size_mb": 10},
                "demo_factories": ["${TEST_VAR}", "2"],
            }
            assert expand_env_vars(config) == {
                "logging": {"level": "DEBUG", "max_size_mb": 10},
                "demo_factories": ["DEBUG", "2"],
            }

    def test_non_string_values_unchanged(self):
        """Test that non-string values pass through."""
        assert expand_env_vars(5) == 5
        assert expand_env_vars(None) is None
