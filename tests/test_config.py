"""Tests for configuration loading."""

import os
import tempfile
import yaml
import pytest
from rollingtime.config import Config
from rollingtime.errors import WindowConfigError


def test_config_defaults():
    """Test that config loads with defaults when file is minimal."""
    config_data = {
        "logging": {"level": "DEBUG"}
    }

    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
        yaml.dump(config_data, f)
        temp_path = f.name

    try:
        config = Config(temp_path)
        assert config.log_level == "DEBUG"
        assert config.tau == 60  # default
        assert config.console_level == "WARNING"  # default
        assert config.log_dir == ""
        assert config.structured_output_config["enabled"] is False
    finally:
        os.unlink(temp_path)


def test_config_env_overrides(tmp_path, monkeypatch):
    """Test that environment variables override config values."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text(yaml.dump({"window": {"tau": 30}, "logging": {"level": "INFO"}}))

    monkeypatch.setenv("RT_TAU", "120")
    monkeypatch.setenv("RT_STRUCTURED_ENABLED", "true")

    config = Config(str(config_path))
    assert config.tau == 120
    assert config.structured_output_config["enabled"] is True
    assert config.log_level == "INFO"  # not overridden


def test_config_local_override(tmp_path, monkeypatch):
    """Test that config.local.yaml is merged over config.yaml."""
    monkeypatch.delenv("RT_TAU", raising=False)
    (tmp_path / "config.yaml").write_text(yaml.dump({"window": {"tau": 30}, "logging": {"level": "INFO"}}))
    (tmp_path / "config.local.yaml").write_text(yaml.dump({"logging": {"level": "DEBUG"}}))

    config = Config(str(tmp_path / "config.yaml"))
    assert config.tau == 30
    assert config.log_level == "DEBUG"


def test_config_explicit_path_must_exist(tmp_path):
    with pytest.raises(FileNotFoundError):
        Config(str(tmp_path / "missing.yaml"))


def test_config_not_found_uses_defaults(tmp_path, monkeypatch):
    """Test that a missing auto-discovered config falls back to defaults."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("RT_TAU", raising=False)

    config = Config()
    assert config.tau == 60
    assert not (tmp_path / "config.yaml").exists()


def test_config_create_if_missing(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("RT_TAU", raising=False)

    config = Config(create_if_missing=True)
    assert (tmp_path / "config.yaml").exists()
    assert config.tau == 60
    assert config.log_rotation == {"max_bytes": 10485760, "backup_count": 30}


@pytest.mark.parametrize("tau", [0, -1, "sixty"])
def test_config_rejects_bad_tau(tmp_path, monkeypatch, tau):
    monkeypatch.delenv("RT_TAU", raising=False)
    config_path = tmp_path / "config.yaml"
    config_path.write_text(yaml.dump({"window": {"tau": tau}}))

    with pytest.raises(WindowConfigError):
        Config(str(config_path))


def test_config_rejects_infinite_tau(tmp_path, monkeypatch):
    """Test that an infinite window duration is refused at load time."""
    monkeypatch.delenv("RT_TAU", raising=False)
    config_path = tmp_path / "config.yaml"
    config_path.write_text("window:\n  tau: .inf\n")

    with pytest.raises(WindowConfigError):
        Config(str(config_path))


def test_config_rejects_infinite_tau_from_env(tmp_path, monkeypatch):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(yaml.dump({"window": {"tau": 30}}))
    monkeypatch.setenv("RT_TAU", "inf")

    with pytest.raises(WindowConfigError):
        Config(str(config_path))
