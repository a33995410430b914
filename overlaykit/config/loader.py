"""YAML configuration loader for overlaykit."""
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from overlaykit.config.arch_profiles import ARCH_PROFILES, build_arch_profiles
from overlaykit.core.config import ScaffoldConfig
from overlaykit.core.logger import get_logger
from overlaykit.models.errors import ConfigError
from overlaykit.models.profile import Architecture, InitSystem

logger = get_logger(__name__)

# Top-level keys copied straight onto ScaffoldConfig
PATH_KEYS = ['overlay_base', 'gentoo_repo', 'repos_conf_dir', 'keywords_dir']
STRING_KEYS = ['overlay_name', 'specific_repo', 'keywords', 'eapi', 'status', 'profile_suffix']
ARCH_PROFILE_KEYS = {'overlay_prefix', 'base', 'systemd', 'use_flags', 'requires_hardened_feature'}


class ConfigLoader:
    """Loads overlaykit configuration files on top of a base config.

    Example file::

        overlay_name: my-overlay
        architectures: [amd64, riscv64]
        init_systems: [systemd]
        arch_profiles:
          riscv64:
            systemd: default/linux/riscv/23.0/rv64/lp64d/systemd
    """

    def __init__(self, config_path: str = "overlaykit.yml"):
        self.config_path = Path(config_path)
        self.raw_config: Optional[Dict[str, Any]] = None

    def load(self, base: Optional[ScaffoldConfig] = None) -> ScaffoldConfig:
        """Load YAML configuration and apply it over ``base``."""
        if not self.config_path.exists():
            raise FileNotFoundError(f"Config file not found: {self.config_path}")

        try:
            with open(self.config_path) as f:
                self.raw_config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {self.config_path}: {e}") from e

        if not isinstance(self.raw_config, dict):
            raise ConfigError(f"{self.config_path} must contain a mapping at the top level")

        logger.debug(f"Loaded configuration from {self.config_path}")
        return self.apply(self.raw_config, base or ScaffoldConfig())

    def apply(self, raw: Dict[str, Any], config: ScaffoldConfig) -> ScaffoldConfig:
        """Apply a raw mapping onto a ScaffoldConfig in place."""
        known = set(PATH_KEYS) | set(STRING_KEYS) | {'architectures', 'init_systems', 'arch_profiles'}
        unknown = sorted(set(raw) - known)
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

        for key in PATH_KEYS:
            if key in raw:
                setattr(config, key, Path(str(raw[key])))

        for key in STRING_KEYS:
            if key in raw:
                setattr(config, key, str(raw[key]))

        if 'architectures' in raw:
            config.architectures = parse_architectures(raw['architectures'])
        if 'init_systems' in raw:
            config.init_systems = parse_init_systems(raw['init_systems'])
        if 'arch_profiles' in raw:
            overrides = _validate_arch_overrides(raw['arch_profiles'])
            try:
                config.arch_profiles = build_arch_profiles(overrides)
            except (KeyError, IndexError, ValueError) as e:
                raise ConfigError(f"Bad placeholder in arch_profiles path: {e}") from e

        return config


def parse_architectures(values: List[Any]) -> List[Architecture]:
    """Convert architecture names into Architecture members, keeping order."""
    return [_parse_enum(Architecture, v, "architecture") for v in _as_list(values, "architectures")]


def parse_init_systems(values: List[Any]) -> List[InitSystem]:
    """Convert init system names into InitSystem members, keeping order."""
    return [_parse_enum(InitSystem, v, "init system") for v in _as_list(values, "init_systems")]


def _as_list(values: Any, key: str) -> List[Any]:
    if isinstance(values, str):
        values = [v.strip() for v in values.split(',') if v.strip()]
    if not isinstance(values, list) or not values:
        raise ConfigError(f"'{key}' must be a non-empty list")
    return values


def _parse_enum(enum_cls, value: Any, label: str):
    try:
        return enum_cls(str(value))
    except ValueError:
        valid = ', '.join(m.value for m in enum_cls)
        raise ConfigError(f"Unknown {label} '{value}' (valid: {valid})") from None


def _validate_arch_overrides(overrides: Any) -> Dict[str, Dict[str, Any]]:
    if not isinstance(overrides, dict):
        raise ConfigError("'arch_profiles' must be a mapping of architecture to settings")

    for arch, settings in overrides.items():
        if arch not in ARCH_PROFILES:
            raise ConfigError(f"Unknown architecture in arch_profiles: '{arch}'")
        if not isinstance(settings, dict):
            raise ConfigError(f"arch_profiles.{arch} must be a mapping")
        bad = sorted(set(settings) - ARCH_PROFILE_KEYS)
        if bad:
            raise ConfigError(f"Unknown keys in arch_profiles.{arch}: {', '.join(bad)}")
        base = settings.get('base', [])
        if not isinstance(base, list) or not all(isinstance(p, str) for p in base):
            raise ConfigError(f"arch_profiles.{arch}.base must be a list of profile paths")
        for key in ('overlay_prefix', 'systemd', 'use_flags'):
            if key in settings and not isinstance(settings[key], str):
                raise ConfigError(f"arch_profiles.{arch}.{key} must be a string")
        if not isinstance(settings.get('requires_hardened_feature', False), bool):
            raise ConfigError(f"arch_profiles.{arch}.requires_hardened_feature must be true or false")

    return overrides
