"""
GitLab raw content.
"""

import re

from gaia.plugins.registries.base import RegistryRawContent


class GitlabRawContent(RegistryRawContent):
    """Repositories on gitlab.com; raw files live under /-/raw/."""

    pattern = re.compile(r"https://gitlab\.com/([^\s]+?)(?:\.git)?/?")

    def build_raw_url(self, repository_path: str, branch: str) -> str:
        return f"https://gitlab.com/{repository_path}/-/raw/{branch}"
