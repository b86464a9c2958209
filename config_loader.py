# /ed25519_verify/config_loader.py

"""
Module: config_loader.py
Purpose: Load verifier configuration from config.ini.
Consumes: $ED25519_VERIFY_CONFIG, or config/config.ini in the working directory
Provides: A Config class with typed access to logging and buffer pool settings.
Failure Mode: Built-in defaults when the default file is absent; raises if an
explicitly configured file is missing.
"""

import configparser
import os
from pathlib import Path


CONFIG_ENV_VAR = "ED25519_VERIFY_CONFIG"
DEFAULT_CONFIG_PATH = "config/config.ini"

DEFAULTS = {
    "LOGGING": {
        "level": "WARNING",
        "log_file": "",
        "when": "midnight",
        "backup_count": "7",
    },
    "BUFFER_POOL": {
        "enabled": "true",
        "max_pooled": "16",
    },
}


class Config:
    def __init__(self, path=None):
        self._parser = configparser.ConfigParser()
        self._parser.read_dict(DEFAULTS)
        self.path = self._resolve_path(path)
        self._load_config()
        self._bind_all()

    def _resolve_path(self, path):
        if path is not None:
            self._explicit = True
            return Path(path)
        env_path = os.environ.get(CONFIG_ENV_VAR)
        self._explicit = bool(env_path)
        return Path(env_path or DEFAULT_CONFIG_PATH)

    def _load_config(self):
        if not self.path.is_file():
            if self._explicit:
                raise FileNotFoundError(f"Config file not found at: {self.path}")
            return
        self._parser.read(self.path)

    def _bind_all(self):
        # --- LOGGING ---
        self.log_level = self._get("LOGGING", "level").upper()
        self.log_file = self._get_path("LOGGING", "log_file")
        self.log_when = self._get("LOGGING", "when")
        self.log_backup_count = self._get_int("LOGGING", "backup_count")

        # --- BUFFER_POOL ---
        self.pool_enabled = self._get_bool("BUFFER_POOL", "enabled")
        self.pool_max_pooled = self._get_int("BUFFER_POOL", "max_pooled")
        if self.pool_max_pooled < 0:
            raise ValueError("BUFFER_POOL.max_pooled must be >= 0")

    # Internal retrieval methods
    def _get(self, section, key):
        return self._parser.get(section, key)

    def _get_int(self, section, key):
        return self._parser.getint(section, key)

    def _get_bool(self, section, key):
        return self._parser.getboolean(section, key)

    def _get_path(self, section, key):
        value = self._parser.get(section, key).strip()
        if not value:
            return None
        return Path(value).expanduser().resolve()


# Global access object
CONFIG = Config()
