"""Core scaffolding for the local overlay and its custom profiles."""

from pathlib import Path
from typing import List, Optional

from overlaykit.core.config import ScaffoldConfig, get_config
from overlaykit.core.logger import get_logger
from overlaykit.core.results import ItemStatus, RunReport
from overlaykit.models.errors import ScaffoldError
from overlaykit.models.profile import Profile, RegistryEntry
from overlaykit.scaffold.templates import (
    build_parent_chain,
    profile_relative_path,
    render_eapi,
    render_layout_conf,
    render_make_defaults,
    render_parent,
    render_repo_name,
    render_repos_conf,
)

logger = get_logger(__name__)


class OverlayScaffolder:
    """Creates the overlay skeleton and one profile per (arch, init) pair."""

    def __init__(self, config: Optional[ScaffoldConfig] = None):
        self.config = config or get_config()

    @property
    def overlay_root(self) -> Path:
        return self.config.overlay_root

    @property
    def profiles_dir(self) -> Path:
        return self.overlay_root / "profiles"

    @property
    def registry_file(self) -> Path:
        return self.profiles_dir / "profiles.desc"

    @property
    def repos_conf_file(self) -> Path:
        return Path(self.config.repos_conf_dir) / f"{self.config.overlay_name}.conf"

    def scaffold(self, clear_registry: bool = True, write_repos_conf: bool = True) -> RunReport:
        """Scaffold the overlay and every configured profile.

        Args:
            clear_registry: Truncate profiles.desc first so reruns do not
                duplicate rows
            write_repos_conf: Register the overlay in repos.conf

        Returns:
            RunReport with one item per profile (plus repos.conf if written)

        Raises:
            ScaffoldError: If the overlay skeleton or metadata cannot be written
        """
        report = RunReport()

        logger.info(f"Creating overlay directory structure at {self.overlay_root}")
        self.create_skeleton()

        if write_repos_conf:
            self.write_repos_conf(report)

        self.write_metadata()

        if clear_registry:
            self.clear_registry()

        for profile in self.plan_profiles():
            self.scaffold_profile(profile, report)

        return report

    def create_skeleton(self) -> None:
        """Create <overlay>/metadata and <overlay>/profiles."""
        try:
            (self.overlay_root / "metadata").mkdir(parents=True, exist_ok=True)
            self.profiles_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ScaffoldError(f"Cannot create overlay at {self.overlay_root}: {e}") from e

    def write_metadata(self) -> None:
        """Write metadata/layout.conf and profiles/repo_name."""
        logger.info(f"Configuring overlay metadata for {self.config.overlay_name}")
        try:
            (self.overlay_root / "metadata" / "layout.conf").write_text(render_layout_conf())
            (self.profiles_dir / "repo_name").write_text(render_repo_name(self.config.overlay_name))
        except OSError as e:
            raise ScaffoldError(f"Cannot write overlay metadata: {e}") from e

    def write_repos_conf(self, report: RunReport) -> None:
        """Register the overlay with portage; failure is reported, not raised."""
        name = f"repos.conf/{self.repos_conf_file.name}"
        logger.info(f"Configuring {self.repos_conf_file}")
        try:
            self.repos_conf_file.write_text(
                render_repos_conf(self.config.overlay_name, self.overlay_root)
            )
        except OSError as e:
            logger.error(f"Failed to write {self.repos_conf_file}: {e}")
            report.add(name, ItemStatus.FAILED, str(e))
            return
        report.add(name, ItemStatus.CREATED)

    def clear_registry(self) -> None:
        """Truncate profiles.desc ahead of a clean rebuild."""
        logger.info(f"Clearing existing profiles.desc for {self.config.overlay_name}")
        try:
            self.registry_file.write_text("")
        except OSError as e:
            raise ScaffoldError(f"Cannot clear {self.registry_file}: {e}") from e

    def plan_profiles(self) -> List[Profile]:
        """Compute every profile without touching the filesystem.

        Order is architecture-major, init-minor, matching profiles.desc.
        """
        profiles = []
        for arch in self.config.architectures:
            arch_profile = self.config.arch_profiles[arch]
            for init in self.config.init_systems:
                relative = profile_relative_path(
                    arch_profile, arch, init, self.config.profile_suffix
                )
                profiles.append(Profile(
                    arch=arch,
                    init=init,
                    relative_path=relative,
                    directory=self.profiles_dir / relative,
                    parents=build_parent_chain(arch_profile, init, self.config.gentoo_profiles),
                    make_defaults=render_make_defaults(arch_profile.use_flags) or None,
                ))
        return profiles

    def scaffold_profile(self, profile: Profile, report: RunReport) -> None:
        """Write one profile directory and append its registry row."""
        name = f"{self.config.overlay_name}:{profile.relative_path}"
        logger.info(f"Creating profile: {name}")

        try:
            profile.directory.mkdir(parents=True, exist_ok=True)

            for filename in profile.files:
                (profile.directory / filename).touch(exist_ok=True)
                logger.debug(f"Created: {filename}")

            if profile.make_defaults:
                (profile.directory / "make.defaults").write_text(profile.make_defaults)
                logger.debug(f"Wrote USE flags to {profile.directory / 'make.defaults'}")

            (profile.directory / "eapi").write_text(render_eapi(self.config.eapi))
            (profile.directory / "parent").write_text(render_parent(profile.parents))

            self.append_registry(profile.registry_entry(self.config.status))
        except OSError as e:
            logger.error(f"Failed to create profile {name}: {e}")
            report.add(name, ItemStatus.FAILED, str(e))
            return

        report.add(name, ItemStatus.CREATED)

    def append_registry(self, entry: RegistryEntry) -> None:
        with open(self.registry_file, "a") as f:
            f.write(entry.to_line())
