"""
Cloud credential value objects.

Credentials are stored by the credential store and copied by value into
jobs at launch time. Each provider knows the environment variables its
terraform provider plugin reads.
"""

from typing import Annotated, Any, Dict, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class BaseCredentials(BaseModel):
    """Common shape of every provider's credentials."""

    model_config = ConfigDict(frozen=True)

    provider: str

    def to_env(self) -> Dict[str, str]:
        """Environment variables exposing these credentials to terraform."""
        raise NotImplementedError


class AWSCredentials(BaseCredentials):
    """AWS access key pair."""

    provider: Literal["aws"] = "aws"
    access_key_id: str
    secret_access_key: str

    def to_env(self) -> Dict[str, str]:
        return {
            "AWS_ACCESS_KEY_ID": self.access_key_id,
            "AWS_SECRET_ACCESS_KEY": self.secret_access_key,
        }


class AzureRMCredentials(BaseCredentials):
    """Azure service principal."""

    provider: Literal["azurerm"] = "azurerm"
    client_id: str
    client_secret: str
    subscription_id: str
    tenant_id: str

    def to_env(self) -> Dict[str, str]:
        return {
            "ARM_CLIENT_ID": self.client_id,
            "ARM_CLIENT_SECRET": self.client_secret,
            "ARM_SUBSCRIPTION_ID": self.subscription_id,
            "ARM_TENANT_ID": self.tenant_id,
        }


class GoogleCredentials(BaseCredentials):
    """Google service account key (JSON document)."""

    provider: Literal["google"] = "google"
    service_account_json: str

    def to_env(self) -> Dict[str, str]:
        return {"GOOGLE_CREDENTIALS": self.service_account_json}


Credentials = Annotated[
    Union[AWSCredentials, AzureRMCredentials, GoogleCredentials],
    Field(discriminator="provider"),
]

_credentials_adapter: TypeAdapter[Credentials] = TypeAdapter(Credentials)


def parse_credentials(data: Dict[str, Any]) -> BaseCredentials:
    """Revive a credentials value object from its dumped form.

    Raises:
        pydantic.ValidationError: unknown provider or missing fields
    """
    return _credentials_adapter.validate_python(data)
