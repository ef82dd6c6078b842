"""
Registry raw-content strategies.

Each strategy recognises repository URLs of one git provider and builds
the URL its raw files are served from. Lookups try strategies in
registration order and use the first match.
"""

from typing import Tuple

from gaia.plugins.registries.base import RegistryRawContent
from gaia.plugins.registries.github import GithubRawContent
from gaia.plugins.registries.gitlab import GitlabRawContent

DEFAULT_RAW_CONTENTS: Tuple[RegistryRawContent, ...] = (
    GithubRawContent(),
    GitlabRawContent(),
)

__all__ = [
    "RegistryRawContent",
    "GithubRawContent",
    "GitlabRawContent",
    "DEFAULT_RAW_CONTENTS",
]
