"""
Module Engine - terraform module documentation lookup.
"""

from gaia.engines.modules.readme_repository import TerraformModuleGitRepository

__all__ = [
    "TerraformModuleGitRepository",
]
