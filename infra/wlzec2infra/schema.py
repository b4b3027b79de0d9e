"""
Schema definitions for the Wavelength EC2 stack.

This module provides the configuration consumed by the CDK application
when it builds the Wavelength zone stack.
"""

from typing import Optional, Tuple

from pydantic import AliasChoices, BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ._unpack_tags import unpack_tags

env_prefix = "WLZ_EC2_"

# Wavelength zones are only offered in some regions
DEFAULT_EDGE_ZONE = "us-west-2-wl1-sfo-wlz-1"
DEFAULT_KEY_NAME = "wl-cdk-demo-1"
DEFAULT_INSTANCE_TYPE = "t3.medium"

ACCOUNT_ENV_VARS = (f"{env_prefix}ACCOUNT", "AWS_ACCOUNT_NUMBER", "CDK_DEFAULT_ACCOUNT")
REGION_ENV_VARS = (f"{env_prefix}REGION", "AWS_REGION", "CDK_DEFAULT_REGION")


class _WlzEc2Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", extra="ignore", env_prefix=env_prefix
    )
    # first match wins, in the process environment or .env
    account: Optional[str] = Field(
        None, validation_alias=AliasChoices(*ACCOUNT_ENV_VARS)
    )
    region: Optional[str] = Field(None, validation_alias=AliasChoices(*REGION_ENV_VARS))
    edge_zone: Optional[str] = None
    key_name: Optional[str] = None
    instance_type: Optional[str] = None
    extra_tags_str: Optional[str] = None  # in the format "key1=value1;key2=value2"


class WlzEc2StackConfig(BaseModel, frozen=True):
    """
    Configuration for the Wavelength EC2 stack.

    Attributes:
        account: AWS account ID (optional, the stack is left
            account-agnostic otherwise)
        region: AWS region that hosts the Wavelength zone
        edge_zone: Wavelength zone the edge subnet and instance are pinned to
        key_name: EC2 key pair name, must already exist in the account
        instance_type: Type of EC2 instance to launch (optional, defaults to t3.medium)
        extra_tags: tuple of 2-tuples of additional stack tags
    """

    account: Optional[str]
    region: str
    edge_zone: str
    key_name: str
    instance_type: str
    extra_tags: Tuple[Tuple[str, str], ...]

    @classmethod
    def from_settings(cls, **kwargs):
        """Create an instance from environment settings with optional overrides."""
        settings = _WlzEc2Settings()

        params = {
            "account": settings.account,
            "region": settings.region,
            "edge_zone": settings.edge_zone or DEFAULT_EDGE_ZONE,
            "key_name": settings.key_name or DEFAULT_KEY_NAME,
            "instance_type": settings.instance_type or DEFAULT_INSTANCE_TYPE,
            "extra_tags": unpack_tags(settings.extra_tags_str),
        }

        # Override with any provided kwargs
        params.update(kwargs)

        if params["region"] is None:
            raise ValueError(
                "Region must be specified either in settings, or as one of the"
                f" environment variables {', '.join(REGION_ENV_VARS)}"
                " (in the environment or a .env file)."
            )

        return cls(**params)
