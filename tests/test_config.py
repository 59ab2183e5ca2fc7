# ==============================================
# Tests for configuration loading
# ==============================================

import pytest

from propel_bundle import config as config_module


@pytest.fixture(autouse=True)
def fresh_config():
    config_module.reset_config()
    yield
    config_module.reset_config()


class TestGetConfig:
    """Tests for get_config()."""

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("PROPEL_GENERATOR", "vendor/bin/propel-gen")
        monkeypatch.setenv("PROPEL_SCHEMA_PATTERN", "*.schema.xml")
        monkeypatch.setenv("PROPEL_BUNDLES_DIR", "app/bundles")

        config = config_module.get_config()

        assert config.build.generator_command == "vendor/bin/propel-gen"
        assert config.build.schema_pattern == "*.schema.xml"
        assert config.build.bundles_dir == "app/bundles"

    def test_defaults(self, monkeypatch):
        for name in ("PROPEL_PROJECT", "PROPEL_DATABASE_ADAPTER"):
            monkeypatch.delenv(name, raising=False)

        config = config_module.get_config()

        assert config.build.project_name == "propel"
        assert config.build.database_adapter == "mysql"

    def test_singleton(self):
        assert config_module.get_config() is config_module.get_config()
