"""Gentoo profile models."""
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional


class Architecture(str, Enum):
    """CPU architectures a profile can be generated for."""
    AMD64 = "amd64"
    ARM64 = "arm64"
    RISCV64 = "riscv64"


class InitSystem(str, Enum):
    """Init systems layered on top of the architecture chain."""
    OPENRC = "openrc"
    SYSTEMD = "systemd"


# Files every generated profile directory carries
PROFILE_FILES = [
    "make.defaults",
    "package.mask",
    "package.use",
    "package.use.force",
    "package.use.mask",
    "packages.build",
    "use.mask",
    "eapi",
    "parent",
]


@dataclass
class ArchProfile:
    """Upstream profile layout for one architecture.

    Paths are relative to ``<gentoo repo>/profiles``.

    Attributes:
        overlay_prefix: Directory under the overlay's profiles/ (e.g. default/linux)
        base: Ordered parent chain inherited by every profile of this arch
        systemd: Parent layered on top of the chain for systemd profiles
        use_flags: USE flags written to make.defaults (empty means no line)
        requires_hardened_feature: Chain pulls in features/hardened instead
            of a per-arch hardened profile
    """
    overlay_prefix: str
    base: List[str]
    systemd: str
    use_flags: str = ""
    requires_hardened_feature: bool = False


@dataclass
class RegistryEntry:
    """One row of profiles/profiles.desc."""
    arch: str
    path: str
    status: str
    alias: str

    def to_line(self) -> str:
        return f"{self.arch}\t{self.path}\t{self.status}\t{self.alias}\n"


@dataclass
class Profile:
    """A concrete (architecture, init system) profile in the overlay."""
    arch: Architecture
    init: InitSystem
    relative_path: str        # e.g. default/linux/amd64/systemd-llvm-desktop
    directory: Path           # absolute directory inside the overlay
    parents: List[str]        # absolute parent profile paths, in order
    make_defaults: Optional[str] = None
    files: List[str] = field(default_factory=lambda: list(PROFILE_FILES))

    @property
    def alias(self) -> str:
        """Short name usable with ``eselect profile set``."""
        return f"llvm-{self.init.value}-desktop-{self.arch.value}"

    def registry_entry(self, status: str) -> RegistryEntry:
        return RegistryEntry(
            arch=self.arch.value,
            path=self.relative_path,
            status=status,
            alias=self.alias,
        )
