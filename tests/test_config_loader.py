"""Tests for configuration defaults, environment and YAML loading."""
from pathlib import Path

import pytest

from overlaykit.config.loader import ConfigLoader, parse_architectures
from overlaykit.core.config import ScaffoldConfig, get_config, set_config
from overlaykit.models.errors import ConfigError
from overlaykit.models.profile import Architecture, InitSystem


class TestScaffoldConfig:
    """Defaults and environment overrides."""

    def test_defaults_match_overlay_layout(self):
        config = ScaffoldConfig()

        assert config.architectures == [Architecture.AMD64, Architecture.ARM64, Architecture.RISCV64]
        assert config.init_systems == [InitSystem.OPENRC, InitSystem.SYSTEMD]
        assert config.overlay_root == Path("/var/db/repos/gentoo-local")
        assert config.gentoo_profiles == Path("/var/db/repos/gentoo/profiles")
        assert config.keywords == "~amd64 ~arm64 ~riscv ~* **"
        assert config.specific_repo == "sakaki-tools"
        assert config.eapi == "6"

    def test_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("OVK_OVERLAY_NAME", "my-overlay")
        monkeypatch.setenv("OVK_OVERLAY_BASE", str(tmp_path))
        monkeypatch.setenv("OVK_KEYWORDS_DIR", str(tmp_path / "kw"))

        config = ScaffoldConfig.from_env()

        assert config.overlay_root == tmp_path / "my-overlay"
        assert config.keywords_dir == tmp_path / "kw"
        assert config.repos_conf_dir == Path("/etc/portage/repos.conf")

    def test_global_config(self):
        custom = ScaffoldConfig(overlay_name="custom")
        set_config(custom)
        assert get_config() is custom

    def test_arch_profiles_are_independent_per_instance(self):
        first = ScaffoldConfig()
        second = ScaffoldConfig()
        first.arch_profiles[Architecture.AMD64].base.append("extra")

        assert "extra" not in second.arch_profiles[Architecture.AMD64].base


class TestConfigLoader:
    """YAML overrides."""

    def write(self, tmp_path, text):
        path = tmp_path / "overlaykit.yml"
        path.write_text(text)
        return path

    def test_overrides_fields(self, tmp_path):
        path = self.write(tmp_path, """
overlay_name: llvm-local
overlay_base: /srv/repos
architectures: [riscv64]
init_systems: systemd
specific_repo: guru
""")
        config = ConfigLoader(str(path)).load()

        assert config.overlay_root == Path("/srv/repos/llvm-local")
        assert config.architectures == [Architecture.RISCV64]
        assert config.init_systems == [InitSystem.SYSTEMD]
        assert config.specific_repo == "guru"

    def test_arch_profile_override(self, tmp_path):
        path = self.write(tmp_path, """
arch_profiles:
  riscv64:
    systemd: default/linux/riscv/24.0/rv64/lp64d/systemd
  amd64:
    base: ["default/linux/{arch}/24.0"]
""")
        config = ConfigLoader(str(path)).load()

        riscv = config.arch_profiles[Architecture.RISCV64]
        assert riscv.systemd == "default/linux/riscv/24.0/rv64/lp64d/systemd"
        assert riscv.use_flags == "pic cfi"
        assert riscv.requires_hardened_feature is True
        assert config.arch_profiles[Architecture.AMD64].base == ["default/linux/amd64/24.0"]
        assert config.arch_profiles[Architecture.ARM64].base[0] == "default/linux/arm64/23.0"

    def test_empty_file_keeps_base(self, tmp_path):
        path = self.write(tmp_path, "")
        base = ScaffoldConfig(overlay_name="base")

        assert ConfigLoader(str(path)).load(base).overlay_name == "base"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ConfigLoader(str(tmp_path / "nope.yml")).load()

    @pytest.mark.parametrize("text, message", [
        ("bogus: 1\n", "Unknown configuration keys: bogus"),
        ("architectures: [sparc]\n", "Unknown architecture 'sparc'"),
        ("init_systems: []\n", "must be a non-empty list"),
        ("arch_profiles:\n  x86: {}\n", "Unknown architecture in arch_profiles"),
        ("arch_profiles:\n  amd64:\n    colour: red\n", "Unknown keys in arch_profiles.amd64"),
        ("arch_profiles:\n  amd64:\n    base: nope\n", "must be a list"),
        ("- just\n- a list\n", "mapping at the top level"),
        ("overlay_name: [unclosed\n", "Invalid YAML"),
        ("architectures: ''\n", "'architectures' must be a non-empty list"),
        ("init_systems: ','\n", "'init_systems' must be a non-empty list"),
        ("arch_profiles:\n  amd64:\n    systemd: 123\n", "arch_profiles.amd64.systemd must be a string"),
        ("arch_profiles:\n  arm64:\n    overlay_prefix: [a]\n", "overlay_prefix must be a string"),
        ("arch_profiles:\n  riscv64:\n    use_flags: 1\n", "use_flags must be a string"),
        ("arch_profiles:\n  amd64:\n    base: [default/linux, 7]\n", "base must be a list of profile paths"),
        ("arch_profiles:\n  riscv64:\n    requires_hardened_feature: yes-please\n",
         "requires_hardened_feature must be true or false"),
        ("arch_profiles:\n  amd64:\n    base: ['default/{flavour}']\n", "Bad placeholder"),
    ])
    def test_invalid_config(self, tmp_path, text, message):
        path = self.write(tmp_path, text)

        with pytest.raises(ConfigError, match=message.replace("[", r"\[")):
            ConfigLoader(str(path)).load()


def test_parse_architectures_accepts_comma_string():
    assert parse_architectures("amd64, arm64") == [Architecture.AMD64, Architecture.ARM64]
