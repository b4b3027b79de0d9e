import os
from pathlib import Path

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from wlzec2infra.schema import WlzEc2StackConfig

INFRA_DIR = Path(__file__).resolve().parents[2] / "infra"

# variables the stack settings read, kept out of entry point runs
_SETTINGS_ENV_PREFIXES = ("WLZ_EC2_", "AWS_", "CDK_")


def has_aws_creds() -> bool:
    """True when the default boto3 session can identify a caller."""
    try:
        boto3.client("sts").get_caller_identity()
    except (BotoCoreError, ClientError):
        return False
    return True


def clean_environ(**overrides: str) -> dict[str, str]:
    env = {
        k: v for k, v in os.environ.items() if not k.startswith(_SETTINGS_ENV_PREFIXES)
    }
    env.update(overrides)
    return env


def make_config(**kwargs) -> WlzEc2StackConfig:
    params = {
        "account": "111111111111",
        "region": "us-west-2",
        "edge_zone": "us-west-2-wl1-sfo-wlz-1",
        "key_name": "wl-cdk-demo-1",
        "instance_type": "t3.medium",
        "extra_tags": (),
    }
    params.update(kwargs)
    return WlzEc2StackConfig(**params)
