"""
GitHub raw content.
"""

import re

from gaia.plugins.registries.base import RegistryRawContent


class GithubRawContent(RegistryRawContent):
    """Repositories on github.com, served from raw.githubusercontent.com."""

    pattern = re.compile(r"https://github\.com/([^\s]+?)(?:\.git)?/?")

    def build_raw_url(self, repository_path: str, branch: str) -> str:
        return f"https://raw.githubusercontent.com/{repository_path}/{branch}"
