"""Test scan configuration loading."""

import json

import pytest

from kubectl_bad.config import CONFIG_ENV_VAR, ConfigError, ScanConfig
from kubectl_bad.health.rules import DEFAULT_NODE_GROUP_LABELS


@pytest.mark.unit
class TestScanConfig:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)

        config = ScanConfig.load()

        assert config.node_group_labels == DEFAULT_NODE_GROUP_LABELS
        assert config.request_timeout is None
        assert config.kubectl_binary == "kubectl"

    def test_defaults_are_not_shared(self):
        config = ScanConfig()
        config.node_group_labels.append("example.com/pool")
        assert "example.com/pool" not in DEFAULT_NODE_GROUP_LABELS

    def test_missing_file_uses_defaults(self, tmp_path):
        config = ScanConfig.load(tmp_path / "missing.yaml")
        assert config == ScanConfig()

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "node_group_labels:\n  - example.com/pool\n  - agentpool\nrequest_timeout: 20s\n"
        )

        config = ScanConfig.load(path)

        assert config.node_group_labels == ["example.com/pool", "agentpool"]
        assert config.request_timeout == "20s"

    def test_load_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"kubectl_binary": "/usr/local/bin/kubectl"}))

        assert ScanConfig.load(path).kubectl_binary == "/usr/local/bin/kubectl"

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("")
        assert ScanConfig.load(path) == ScanConfig()

    def test_env_var_path(self, tmp_path, monkeypatch):
        path = tmp_path / "config.yaml"
        path.write_text("request_timeout: 5s\n")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

        assert ScanConfig.load().request_timeout == "5s"

    def test_invalid_values(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("node_group_labels: 7\n")

        with pytest.raises(ConfigError, match="invalid config file"):
            ScanConfig.load(path)

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("node_group_labels: [unclosed\n")

        with pytest.raises(ConfigError):
            ScanConfig.load(path)
