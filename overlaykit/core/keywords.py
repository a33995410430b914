"""ACCEPT_KEYWORDS entries for installed repositories.

Each repository gets ``<keywords_dir>/<repo>-repo`` holding a single
``*/*::<repo> <keywords>`` line. Lines are only appended when missing, so
running the appender again leaves every file unchanged.
"""
from pathlib import Path
from typing import Iterable, List, Optional

from overlaykit.core.config import ScaffoldConfig, get_config
from overlaykit.core.logger import get_logger
from overlaykit.core.results import ItemStatus, RunReport

logger = get_logger(__name__)


def keyword_line(repo: str, keywords: str) -> str:
    return f"*/*::{repo} {keywords}"


class KeywordAppender:
    """Appends keyword lines for a specific repository and all others."""

    def __init__(self, config: Optional[ScaffoldConfig] = None, create_dirs: bool = True):
        self.config = config or get_config()
        self.create_dirs = create_dirs

    def keyword_file(self, repo: str) -> Path:
        return Path(self.config.keywords_dir) / f"{repo}-repo"

    def ordered_repositories(self, discovered: Iterable[str]) -> List[str]:
        """Specific repository first, then discovered ones without repeats."""
        ordered = [self.config.specific_repo]
        for repo in discovered:
            if repo not in ordered:
                ordered.append(repo)
        return ordered

    def apply(self, discovered: Iterable[str]) -> RunReport:
        """Ensure every repository has its keyword line.

        A failure for one repository is recorded and the rest are still
        processed.
        """
        report = RunReport()
        for repo in self.ordered_repositories(discovered):
            try:
                status = self.ensure_keywords(repo)
            except (OSError, UnicodeError) as e:
                logger.error(f"Failed to configure keywords for {repo}: {e}")
                report.add(repo, ItemStatus.FAILED, str(e))
                continue
            report.add(repo, status)

        logger.info("Repository keywords configuration completed.")
        return report

    def ensure_keywords(self, repo: str) -> ItemStatus:
        """Append the keyword line for ``repo`` unless it is already there.

        Returns:
            ItemStatus.APPENDED or ItemStatus.PRESENT

        Raises:
            OSError: If the file cannot be read or written
        """
        path = self.keyword_file(repo)
        line = keyword_line(repo, self.config.keywords)

        existing = path.read_text(encoding="utf-8", errors="surrogateescape") if path.exists() else ""
        if line in (entry.strip() for entry in existing.splitlines()):
            logger.info(f"Keywords already present for {repo}.")
            return ItemStatus.PRESENT

        if self.create_dirs:
            path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "a", encoding="utf-8") as f:
            if existing and not existing.endswith("\n"):
                f.write("\n")
            f.write(f"{line}\n")

        logger.info(f"Keywords appended for {repo}.")
        return ItemStatus.APPENDED
