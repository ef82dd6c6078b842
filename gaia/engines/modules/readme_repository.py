"""
README location for modules hosted on git providers.
"""

from typing import Optional, Sequence

from gaia.kernel.models.module import TerraformModule
from gaia.plugins.registries import DEFAULT_RAW_CONTENTS, RegistryRawContent


class TerraformModuleGitRepository:
    """Finds a module's README through the first registry that knows its host."""

    def __init__(self, raw_contents: Sequence[RegistryRawContent] = DEFAULT_RAW_CONTENTS):
        self.raw_contents = list(raw_contents)

    def get_readme(self, module: TerraformModule) -> Optional[str]:
        """Raw URL of the module's README.md, or None for an unknown host."""
        url = module.git_repository_url
        for raw_content in self.raw_contents:
            if raw_content.matches(url):
                raw_url = raw_content.get_raw_url(url, module.git_branch, module.directory)
                return f"{raw_url}/README.md"
        return None
