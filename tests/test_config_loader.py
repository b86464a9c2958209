import pytest

import config_loader
from config_loader import Config


def write_config(path, body):
    path.write_text(body)
    return path


def test_defaults_without_file(tmp_path, monkeypatch):
    monkeypatch.delenv(config_loader.CONFIG_ENV_VAR, raising=False)
    monkeypatch.chdir(tmp_path)
    cfg = Config()
    assert cfg.log_level == "WARNING"
    assert cfg.log_file is None
    assert cfg.log_when == "midnight"
    assert cfg.log_backup_count == 7
    assert cfg.pool_enabled is True
    assert cfg.pool_max_pooled == 16


def test_explicit_path(tmp_path):
    ini = write_config(tmp_path / "verify.ini", (
        "[LOGGING]\n"
        "level = debug\n"
        "log_file = logs/verify.log\n"
        "backup_count = 3\n"
        "[BUFFER_POOL]\n"
        "enabled = no\n"
    ))
    cfg = Config(ini)
    assert cfg.log_level == "DEBUG"
    assert cfg.log_file.name == "verify.log"
    assert cfg.log_file.is_absolute()
    assert cfg.log_backup_count == 3
    assert cfg.pool_enabled is False
    assert cfg.pool_max_pooled == 16


def test_env_var_path(tmp_path, monkeypatch):
    ini = write_config(tmp_path / "env.ini", "[BUFFER_POOL]\nmax_pooled = 2\n")
    monkeypatch.setenv(config_loader.CONFIG_ENV_VAR, str(ini))
    assert Config().pool_max_pooled == 2


def test_default_path_in_working_directory(tmp_path, monkeypatch):
    monkeypatch.delenv(config_loader.CONFIG_ENV_VAR, raising=False)
    monkeypatch.chdir(tmp_path)
    (tmp_path / "config").mkdir()
    write_config(tmp_path / "config" / "config.ini", "[LOGGING]\nlevel = INFO\n")
    assert Config().log_level == "INFO"


def test_missing_explicit_file(tmp_path, monkeypatch):
    with pytest.raises(FileNotFoundError):
        Config(tmp_path / "absent.ini")
    monkeypatch.setenv(config_loader.CONFIG_ENV_VAR, str(tmp_path / "absent.ini"))
    with pytest.raises(FileNotFoundError):
        Config()


def test_negative_pool_size(tmp_path):
    ini = write_config(tmp_path / "bad.ini", "[BUFFER_POOL]\nmax_pooled = -1\n")
    with pytest.raises(ValueError):
        Config(ini)
