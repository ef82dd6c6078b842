"""
Base raw-content strategy - interface every git provider implements.
"""

import re
from abc import ABC, abstractmethod
from typing import Optional


class RegistryRawContent(ABC):
    """
    Maps a git repository URL to the URL serving its raw files.

    Subclasses set `pattern`; its first group is the repository path
    handed to `build_raw_url`.
    """

    pattern: re.Pattern

    def matches(self, repository_url: Optional[str]) -> bool:
        """Whether this provider hosts the repository."""
        if not repository_url:
            return False
        return self.pattern.fullmatch(repository_url) is not None

    def get_raw_url(
        self,
        repository_url: str,
        branch: Optional[str],
        directory: Optional[str],
    ) -> str:
        """Base URL of the raw files under directory on branch."""
        match = self.pattern.fullmatch(repository_url)
        if match is None:
            raise ValueError(f"Unsupported repository url: {repository_url}")
        base = self.build_raw_url(match.group(1), branch or "master")
        directory = (directory or "").strip("/")
        return f"{base}/{directory}" if directory else base

    @abstractmethod
    def build_raw_url(self, repository_path: str, branch: str) -> str:
        """Raw URL of the repository root on branch."""
        pass
