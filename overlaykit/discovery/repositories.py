"""Discover installed package repositories via eselect."""
import re
import subprocess
from typing import List

from overlaykit.core.logger import get_logger
from overlaykit.models.errors import RepositoryDiscoveryError

logger = get_logger(__name__)

ESELECT_LIST_CMD = ['eselect', 'repository', 'list']


INDEX_RE = re.compile(r'^\[\d+\]$')


def parse_repository_list(output: str) -> List[str]:
    """Extract repository names from ``eselect repository list`` output.

    Takes the first column of each line, skipping blanks, ``#`` comments and
    the "Available repositories:" header. A leading ``[N]`` index column is
    dropped.
    """
    repos = []
    for line in output.splitlines():
        fields = line.split()
        if fields and INDEX_RE.match(fields[0]):
            fields = fields[1:]
        if not fields or fields[0].startswith('#') or line.rstrip().endswith(':'):
            continue
        repos.append(fields[0])
    return repos


class RepositoryLister:
    """Lists repository identifiers known to the package manager."""

    def __init__(self, mock: bool = False, command: List[str] = None):
        self.mock = mock
        self.command = command or list(ESELECT_LIST_CMD)

    def list_repositories(self) -> List[str]:
        """Return installed repository names in the order eselect prints them.

        Raises:
            RepositoryDiscoveryError: If the listing command fails
        """
        if self.mock:
            logger.info(f"MOCK: Would run {' '.join(self.command)}")
            return []

        try:
            result = subprocess.run(self.command, capture_output=True, text=True, check=True)
        except FileNotFoundError as e:
            raise RepositoryDiscoveryError(f"{self.command[0]} not found: {e}") from e
        except subprocess.CalledProcessError as e:
            if e.stderr:
                logger.error(f"Error output: {e.stderr}")
            raise RepositoryDiscoveryError(
                f"'{' '.join(self.command)}' exited with status {e.returncode}"
            ) from e

        repos = parse_repository_list(result.stdout)
        logger.debug(f"Discovered {len(repos)} repositories")
        return repos
