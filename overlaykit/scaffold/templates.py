"""Text templates for overlay metadata and profile files."""

from pathlib import Path
from typing import List

from overlaykit.config.arch_profiles import DESKTOP_TARGET, HARDENED_FEATURE, OPENRC_TARGET
from overlaykit.models.profile import ArchProfile, Architecture, InitSystem


def render_layout_conf() -> str:
    """metadata/layout.conf for an overlay that builds on ::gentoo."""
    return "masters = gentoo\nprofile-formats = portage-2\n"


def render_repo_name(name: str) -> str:
    return f"{name}\n"


def render_repos_conf(name: str, location: Path) -> str:
    """repos.conf section registering the overlay with portage."""
    return (
        f"[{name}]\n"
        f"location = {location}\n"
        "masters = gentoo\n"
        "priority = 100\n"
        "auto-sync = no\n"
    )


def render_eapi(eapi: str) -> str:
    return f"{eapi}\n"


def render_make_defaults(use_flags: str) -> str:
    """make.defaults body; empty when the arch sets no USE flags."""
    if not use_flags:
        return ""
    return f'USE="{use_flags}"\n'


def render_parent(parents: List[str]) -> str:
    return "".join(f"{parent}\n" for parent in parents)


def profile_relative_path(
    arch_profile: ArchProfile,
    arch: Architecture,
    init: InitSystem,
    suffix: str,
) -> str:
    """Path of a profile below the overlay's profiles/ directory."""
    return f"{arch_profile.overlay_prefix}/{arch.value}/{init.value}-{suffix}"


def build_parent_chain(
    arch_profile: ArchProfile,
    init: InitSystem,
    gentoo_profiles: Path,
) -> List[str]:
    """Absolute parent profiles: arch chain, desktop target, then init layer."""
    relative = list(arch_profile.base)
    if arch_profile.requires_hardened_feature:
        relative.append(HARDENED_FEATURE)
    relative.append(DESKTOP_TARGET)

    if init == InitSystem.SYSTEMD:
        relative.append(arch_profile.systemd)
    else:
        relative.append(OPENRC_TARGET)

    return [f"{gentoo_profiles}/{path}" for path in relative]
