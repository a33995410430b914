"""overlaykit runtime configuration and settings."""
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from overlaykit.config.arch_profiles import build_arch_profiles
from overlaykit.models.profile import ArchProfile, Architecture, InitSystem


@dataclass
class ScaffoldConfig:
    """Runtime configuration for overlay scaffolding and keyword setup.

    Attributes:
        architectures: Architectures to generate profiles for
        init_systems: Init systems to generate profiles for
        overlay_name: Name of the local overlay (default: gentoo-local)
        overlay_base: Directory holding repositories (default: /var/db/repos)
        gentoo_repo: Location of the main Gentoo repository
        repos_conf_dir: Portage repos.conf directory
        keywords_dir: Portage package.accept_keywords directory
        specific_repo: Repository whose keywords are configured first
        keywords: Keyword string accepted for every repository
        eapi: EAPI written to each profile
        status: profiles.desc status column
        profile_suffix: Suffix of each profile directory after the init name
        arch_profiles: Parent chains keyed by architecture
    """

    architectures: List[Architecture] = field(default_factory=lambda: list(Architecture))
    init_systems: List[InitSystem] = field(default_factory=lambda: list(InitSystem))

    overlay_name: str = "gentoo-local"
    overlay_base: Path = Path("/var/db/repos")
    gentoo_repo: Path = Path("/var/db/repos/gentoo")

    # Portage configuration (writing here needs root)
    repos_conf_dir: Path = Path("/etc/portage/repos.conf")
    keywords_dir: Path = Path("/etc/portage/package.accept_keywords")

    specific_repo: str = "sakaki-tools"
    keywords: str = "~amd64 ~arm64 ~riscv ~* **"

    eapi: str = "6"
    status: str = "exp"
    profile_suffix: str = "llvm-desktop"

    arch_profiles: Dict[Architecture, ArchProfile] = field(default_factory=build_arch_profiles)

    @property
    def overlay_root(self) -> Path:
        """Absolute location of the overlay."""
        return Path(self.overlay_base) / self.overlay_name

    @property
    def gentoo_profiles(self) -> Path:
        return Path(self.gentoo_repo) / "profiles"

    @classmethod
    def from_env(cls) -> "ScaffoldConfig":
        """Create config from environment variables.

        Environment variables:
            OVK_OVERLAY_NAME: Overlay name
            OVK_OVERLAY_BASE: Directory the overlay is created in
            OVK_GENTOO_REPO: Main Gentoo repository location
            OVK_REPOS_CONF_DIR: repos.conf directory
            OVK_KEYWORDS_DIR: package.accept_keywords directory

        Returns:
            ScaffoldConfig instance with values from environment or defaults
        """
        return cls(
            overlay_name=os.getenv("OVK_OVERLAY_NAME", cls.overlay_name),
            overlay_base=Path(os.getenv("OVK_OVERLAY_BASE", str(cls.overlay_base))),
            gentoo_repo=Path(os.getenv("OVK_GENTOO_REPO", str(cls.gentoo_repo))),
            repos_conf_dir=Path(os.getenv("OVK_REPOS_CONF_DIR", str(cls.repos_conf_dir))),
            keywords_dir=Path(os.getenv("OVK_KEYWORDS_DIR", str(cls.keywords_dir))),
        )


# Global config instance (can be overridden)
_config: Optional[ScaffoldConfig] = None


def get_config() -> ScaffoldConfig:
    """Get the global overlaykit configuration.

    Returns:
        ScaffoldConfig instance (creates from environment if not set)
    """
    global _config
    if _config is None:
        _config = ScaffoldConfig.from_env()
    return _config


def set_config(config: Optional[ScaffoldConfig]):
    """Set the global overlaykit configuration.

    Args:
        config: ScaffoldConfig instance to use globally (None resets it)
    """
    global _config
    _config = config
