"""
Job schemas.
"""

from pydantic import BaseModel, ConfigDict, Field


class JobLaunched(BaseModel):
    """Acknowledgement returned once a job has been persisted."""

    model_config = ConfigDict(populate_by_name=True)

    job_id: str = Field(..., alias="jobId")
