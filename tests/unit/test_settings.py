"""Unit tests for credential_sapiens/config/settings.py."""

from pathlib import Path

import pytest

from credential_sapiens.config.settings import HelperSettings
from credential_sapiens.enums import HostProviderType, StoreType
from credential_sapiens.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Isolate tests from SAPIENS_CREDENTIAL_* variables of the host."""
    for name in (
        "SAPIENS_CREDENTIAL_STORE",
        "SAPIENS_CREDENTIAL_NAMESPACE",
        "SAPIENS_CREDENTIAL_PROVIDER",
        "SAPIENS_CREDENTIAL_MASTER_PASSWORD",
        "SAPIENS_CREDENTIAL_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


class TestHelperSettings:
    """Tests for defaults, validation and environment loading."""

    def test_defaults(self):
        settings = HelperSettings()

        assert settings.store == StoreType.KEYRING
        assert settings.namespace == "git"
        assert settings.provider is None
        assert settings.allow_generic is True
        assert settings.log_level == "WARNING"
        assert settings.master_password is None

    def test_environment_variables(self, monkeypatch):
        monkeypatch.setenv("SAPIENS_CREDENTIAL_STORE", "memory")
        monkeypatch.setenv("SAPIENS_CREDENTIAL_PROVIDER", "gitlab")
        monkeypatch.setenv("SAPIENS_CREDENTIAL_MASTER_PASSWORD", "hunter2")

        settings = HelperSettings()

        assert settings.store == StoreType.MEMORY
        assert settings.provider == HostProviderType.GITLAB
        assert settings.master_password.get_secret_value() == "hunter2"

    @pytest.mark.parametrize("namespace", ["", "  ", "a:b"])
    def test_invalid_namespace(self, namespace):
        with pytest.raises(ValueError):
            HelperSettings(namespace=namespace)

    def test_log_level_normalized(self):
        assert HelperSettings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValueError):
            HelperSettings(log_level="chatty")

    def test_encrypted_file_path_expands_user(self):
        settings = HelperSettings(encrypted_file=Path("~/creds.enc"))

        assert settings.encrypted_file_path == Path.home() / "creds.enc"


class TestFromYaml:
    """Tests for HelperSettings.from_yaml."""

    def test_loads_yaml(self, tmp_path):
        config = tmp_path / "config.yaml"
        config.write_text(
            "store: memory\n"
            "namespace: work\n"
            "gitlab_hosts:\n"
            "  - git.example.com\n"
            "allow_generic: false\n"
        )

        settings = HelperSettings.from_yaml(config)

        assert settings.store == StoreType.MEMORY
        assert settings.namespace == "work"
        assert settings.gitlab_hosts == ["git.example.com"]
        assert settings.allow_generic is False

    def test_env_interpolation(self, tmp_path, monkeypatch):
        monkeypatch.setenv("TEST_MASTER_PW", "from-env")
        config = tmp_path / "config.yaml"
        config.write_text("store: encrypted\nmaster_password: ${TEST_MASTER_PW}\nnamespace: ${TEST_NS:-git}\n")

        settings = HelperSettings.from_yaml(config)

        assert settings.master_password.get_secret_value() == "from-env"
        assert settings.namespace == "git"

    def test_missing_env_var(self, tmp_path, monkeypatch):
        monkeypatch.delenv("TEST_UNSET_VAR", raising=False)
        config = tmp_path / "config.yaml"
        config.write_text("master_password: ${TEST_UNSET_VAR}\n")

        with pytest.raises(ConfigurationError, match="TEST_UNSET_VAR"):
            HelperSettings.from_yaml(config)

    def test_comments_not_interpolated(self, tmp_path, monkeypatch):
        monkeypatch.delenv("TEST_UNSET_VAR", raising=False)
        config = tmp_path / "config.yaml"
        config.write_text("# master_password: ${TEST_UNSET_VAR}\nstore: memory\n")

        assert HelperSettings.from_yaml(config).store == StoreType.MEMORY

    def test_empty_file_uses_defaults(self, tmp_path):
        config = tmp_path / "config.yaml"
        config.write_text("")

        assert HelperSettings.from_yaml(config).namespace == "git"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            HelperSettings.from_yaml(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        config = tmp_path / "config.yaml"
        config.write_text("store: [unclosed\n")

        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            HelperSettings.from_yaml(config)

    def test_non_mapping(self, tmp_path):
        config = tmp_path / "config.yaml"
        config.write_text("- a\n- b\n")

        with pytest.raises(ConfigurationError, match="YAML object"):
            HelperSettings.from_yaml(config)

    def test_invalid_value(self, tmp_path):
        config = tmp_path / "config.yaml"
        config.write_text("store: floppy\n")

        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            HelperSettings.from_yaml(config)
