"""Unit tests for configuration."""

import logging

import pytest

from group_assigner import GroupAssignerConfig


def test_config_defaults() -> None:
    """Test values used when only the group name is set."""
    config = GroupAssignerConfig.from_environ({"GROUP_NAME": "members"})

    assert config.group_name == "members"
    assert config.user_pool_id is None
    assert config.connect_timeout == 1.0
    assert config.read_timeout == 3.0
    assert config.min_remaining_ms == 500


def test_config_reads_every_setting() -> None:
    config = GroupAssignerConfig.from_environ(
        {
            "GROUP_NAME": " members ",
            "USER_POOL_ID": "us-east-1_EXAMPLE",
            "COGNITO_CONNECT_TIMEOUT": "1.5",
            "COGNITO_READ_TIMEOUT": "3",
            "MIN_REMAINING_TIME_MS": "250",
        }
    )

    assert config.group_name == "members"
    assert config.user_pool_id == "us-east-1_EXAMPLE"
    assert config.connect_timeout == 1.5
    assert config.read_timeout == 3.0
    assert config.min_remaining_ms == 250


def test_config_treats_empty_values_as_unset() -> None:
    config = GroupAssignerConfig.from_environ({"GROUP_NAME": "", "USER_POOL_ID": "   "})

    assert config.group_name is None
    assert config.user_pool_id is None


def test_config_from_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GROUP_NAME", "odmd-central-user")
    monkeypatch.setenv("USER_POOL_ID", "us-east-1_POOL")

    config = GroupAssignerConfig.from_environ()

    assert config.group_name == "odmd-central-user"
    assert config.user_pool_id == "us-east-1_POOL"


@pytest.mark.parametrize(
    "name,value,attribute,default",
    [
        ("COGNITO_CONNECT_TIMEOUT", "soon", "connect_timeout", 1.0),
        ("COGNITO_READ_TIMEOUT", "5s", "read_timeout", 3.0),
        ("COGNITO_READ_TIMEOUT", "-1", "read_timeout", 3.0),
        ("MIN_REMAINING_TIME_MS", "0.5", "min_remaining_ms", 500),
    ],
)
def test_config_falls_back_on_bad_numbers(
    name: str, value: str, attribute: str, default, logger: logging.Logger, caplog: pytest.LogCaptureFixture
) -> None:
    """Test a bad tuning value is logged and replaced instead of failing the load."""
    with caplog.at_level(logging.WARNING, logger=logger.name):
        config = GroupAssignerConfig.from_environ({"GROUP_NAME": "members", name: value}, logger=logger)

    assert getattr(config, attribute) == default
    assert config.group_name == "members"
    record = next(r for r in caplog.records if r.getMessage() == "Ignoring invalid setting, using default")
    assert record.setting == name
    assert record.levelno == logging.WARNING
