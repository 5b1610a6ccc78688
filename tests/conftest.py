"""Test configuration utilities shared across the kernel suite."""

from __future__ import annotations

import os
import pathlib
import sys
import tempfile

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


_DEFAULT_ENV = {
    "TABLE_PREFIX": "wp_",
    "NETWORK_TABLE_PREFIX": "wpnet_",
    "PLUGINS_URL": "https://example.com/wp-content/plugins",
    "UPLOADS_DIR": os.path.join(tempfile.gettempdir(), "plugin-kernel-uploads"),
    "DATABASE_URL": "sqlite+pysqlite:///:memory:",
    "OBJECT_CACHE": "memory",
    "LOG_LEVEL": "WARNING",
}


for _key, _value in _DEFAULT_ENV.items():
    os.environ.setdefault(_key, _value)


from kernel import HostEnvironment, PluginContext  # noqa: E402


PLUGIN_CONFIG = {
    "file": "/srv/plugins/my-plugin/my-plugin.php",
    "slug": "my-plugin",
    "prefix": "myplugin_",
    "textDomain": "my-plugin",
    "version": "1.0.0",
}


@pytest.fixture
def host(tmp_path) -> HostEnvironment:
    return HostEnvironment(
        table_prefix="wp_",
        network_table_prefix="wpnet_",
        plugins_url="https://example.com/wp-content/plugins/",
        uploads_dir=str(tmp_path / "uploads"),
    )


@pytest.fixture
def context(host) -> PluginContext:
    return PluginContext.create(PLUGIN_CONFIG, host=host)


@pytest.fixture(autouse=True)
def _reset_settings():
    import core.config

    yield
    core.config._settings = None
