"""CDK application entry point for the Wavelength EC2 infrastructure.

This module loads the stack configuration from the environment (or a
.env file) and synthesizes the Wavelength EC2 stack.
"""
import logging

import aws_cdk as cdk
from wlzec2infra._unpack_tags import apply_tags
from wlzec2infra.schema import WlzEc2StackConfig
from wlzec2infra.wlz_ec2_stack import WlzEc2Stack

logging.basicConfig(level=logging.INFO)

config = WlzEc2StackConfig.from_settings()

app = cdk.App()

core_stack = WlzEc2Stack(
    app,
    "WlEc2Stack",
    config=config,
    env=cdk.Environment(account=config.account, region=config.region),
    tags={
        "Project": "wlzec2infra",
    },
)

apply_tags(core_stack, config.extra_tags)

app.synth()
