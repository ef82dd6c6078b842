"""
Pydantic value objects and response schemas.
"""

from gaia.schemas.credentials import (
    AWSCredentials,
    AzureRMCredentials,
    BaseCredentials,
    Credentials,
    GoogleCredentials,
    parse_credentials,
)
from gaia.schemas.job import JobLaunched

__all__ = [
    "AWSCredentials",
    "AzureRMCredentials",
    "BaseCredentials",
    "Credentials",
    "GoogleCredentials",
    "parse_credentials",
    "JobLaunched",
]
