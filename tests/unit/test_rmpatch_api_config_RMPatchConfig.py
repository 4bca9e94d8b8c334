"""Unit tests for RMPatchConfig loading and validation."""

import pytest

from rmpatch.api.config import DEFAULT_PROFILE, RemoteConfig, RMPatchConfig

pytestmark = pytest.mark.config


class TestLoad:
    def test_missing_file_yields_defaults(self):
        config = RMPatchConfig.load()
        assert config.remote.host == "10.11.99.1"
        assert config.remote.user == "root"
        assert config.remote.verify_method == "remote"
        assert config.backup.directory == "."
        assert config.profile == DEFAULT_PROFILE
        assert config.profiles == []

    def test_config_path_follows_home(self, rmpatch_home):
        assert RMPatchConfig.get_home_dir() == rmpatch_home.resolve()
        assert RMPatchConfig.get_config_path() == rmpatch_home.resolve() / "config.json"

    def test_loads_values(self, write_config):
        write_config(
            {
                "remote": {"host": "192.168.1.20", "port": 2222, "scp_options": ["-O"]},
                "log": {"level": "DEBUG"},
            }
        )
        config = RMPatchConfig.load()
        assert config.remote.host == "192.168.1.20"
        assert config.remote.port == 2222
        assert config.remote.scp_options == ["-O"]
        assert config.log.level == "DEBUG"

    def test_loads_user_profiles(self, rmpatch_config):
        config = RMPatchConfig.load()
        assert config.profile == "test-webui"
        assert [p.name for p in config.profiles] == ["test-webui"]

    def test_invalid_json(self, rmpatch_home):
        (rmpatch_home / "config.json").write_text("{invalid")
        with pytest.raises(ValueError, match="Invalid JSON"):
            RMPatchConfig.load()

    def test_not_an_object(self, write_config, rmpatch_home):
        (rmpatch_home / "config.json").write_text("[1, 2]")
        with pytest.raises(ValueError, match="must contain a JSON object"):
            RMPatchConfig.load()

    def test_validation_error_names_field(self, write_config):
        write_config({"remote": {"port": 0}})
        with pytest.raises(ValueError, match=r"Configuration validation error: remote\.port"):
            RMPatchConfig.load()

    def test_unknown_field(self, write_config):
        write_config({"remote": {"hostname": "x"}})
        with pytest.raises(ValueError, match="remote.hostname"):
            RMPatchConfig.load()


class TestRemoteConfig:
    def test_service_commands_need_placeholder(self):
        with pytest.raises(ValueError, match="placeholder"):
            RemoteConfig(stop_command="systemctl stop xochitl")

    def test_verify_method(self):
        assert RemoteConfig(verify_method="pull").verify_method == "pull"
        with pytest.raises(ValueError):
            RemoteConfig(verify_method="rsync")

    def test_empty_host(self):
        with pytest.raises(ValueError, match="non-empty"):
            RemoteConfig(host="  ")


def test_to_dict_summarizes_profiles(rmpatch_config):
    data = RMPatchConfig.load().to_dict()
    assert set(data) == {"remote", "backup", "log", "profile", "profiles"}
    assert data["profiles"] == [
        {"name": "test-webui", "description": "Synthetic profile for tests", "remote_path": "/usr/bin/xochitl"}
    ]


def test_unreadable_config_is_a_value_error(rmpatch_home):
    (rmpatch_home / "config.json").mkdir()
    with pytest.raises(ValueError, match="Cannot read config file"):
        RMPatchConfig.load()
