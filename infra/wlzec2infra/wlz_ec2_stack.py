"""Module for defining the Wavelength EC2 infrastructure using AWS CDK.

This module contains the CDK stack definition for running a single EC2
instance inside an AWS Wavelength zone, reachable from the carrier
network through a carrier IP address.

Wavelength zones do not support the higher level ``ec2.Instance``
construct, so the instance is created from a launch template whose
network interface requests a carrier IP.
"""

from logging import getLogger

import aws_cdk as cdk
import aws_cdk.aws_ec2 as ec2
import aws_cdk.aws_iam as iam
from constructs import Construct

from .edge_network import ANY_IPV4_CIDR, EdgeNetwork
from .schema import WlzEc2StackConfig

logger = getLogger(__name__)

SSH_PORT = 22
APP_PORT = 5000
LAUNCH_TEMPLATE_NAME = "wl-launch-template"
SECURITY_GROUP_NAME = "wlz-sg"


class WlzEc2Stack(cdk.Stack):
    """CDK Stack for a single EC2 instance in a Wavelength zone.

    Creates the VPC and carrier connectivity, the instance identity,
    its security group, launch template and the instance itself.
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        *,
        config: WlzEc2StackConfig,
        **kwargs,
    ) -> None:
        """Initialize the Wavelength EC2 stack.

        Args:
            scope: The parent construct.
            id: The construct ID.
            config: Zone, key pair and instance settings for the stack.
            **kwargs: Additional keyword arguments passed to the parent Stack.
        """
        super().__init__(scope, id, **kwargs)

        logger.info(
            f"Declaring {config.instance_type} instance in {config.edge_zone}"
            f" with key pair {config.key_name}"
        )

        # IAM Role for the EC2 instance
        self.instance_role = iam.Role(
            self,
            "WlzInstanceRole",
            assumed_by=iam.ServicePrincipal("ec2.amazonaws.com"),
        )

        self.network = EdgeNetwork(self, "Network", edge_zone=config.edge_zone)

        self.security_group = ec2.SecurityGroup(
            self,
            "WlzSecurityGroup",
            vpc=self.network.vpc,
            allow_all_outbound=True,
            security_group_name=SECURITY_GROUP_NAME,
        )

        # Carrier devices reach the instance from addresses outside the VPC
        self.security_group.add_ingress_rule(
            ec2.Peer.ipv4(ANY_IPV4_CIDR),
            ec2.Port.tcp(SSH_PORT),
            "Allows SSH access from bastion",
        )
        self.security_group.add_ingress_rule(
            ec2.Peer.ipv4(ANY_IPV4_CIDR),
            ec2.Port.tcp(APP_PORT),
            "Allows HTTP access from carrier network",
        )
        self.security_group.add_ingress_rule(
            ec2.Peer.ipv4(ANY_IPV4_CIDR),
            ec2.Port.icmp_ping(),
            "Allows ICMP pings from carrier devices",
        )

        self.instance_profile = iam.CfnInstanceProfile(
            self,
            "WlzInstanceProfile",
            roles=[self.instance_role.role_name],
        )

        image = ec2.MachineImage.latest_amazon_linux2023()

        self.launch_template = ec2.CfnLaunchTemplate(
            self,
            "WlzLaunchTemplate",
            launch_template_name=LAUNCH_TEMPLATE_NAME,
            launch_template_data=ec2.CfnLaunchTemplate.LaunchTemplateDataProperty(
                network_interfaces=[
                    ec2.CfnLaunchTemplate.NetworkInterfaceProperty(
                        device_index=0,
                        associate_carrier_ip_address=True,
                        groups=[self.security_group.security_group_id],
                        delete_on_termination=True,
                        subnet_id=self.network.edge_subnet.subnet_id,
                    )
                ],
                image_id=image.get_image(self).image_id,
                instance_type=config.instance_type,
                key_name=config.key_name,  # key pair must exist before deploying
                iam_instance_profile=ec2.CfnLaunchTemplate.IamInstanceProfileProperty(
                    arn=self.instance_profile.attr_arn
                ),
            ),
        )

        self.instance = ec2.CfnInstance(
            self,
            "WlzInstance",
            launch_template=ec2.CfnInstance.LaunchTemplateSpecificationProperty(
                launch_template_name=LAUNCH_TEMPLATE_NAME,
                version=self.launch_template.attr_default_version_number,
            ),
            availability_zone=config.edge_zone,
        )

        # Public DNS name resolves to the carrier IP of the instance
        cdk.CfnOutput(
            self,
            "WlzInstancePublicDns",
            value=self.instance.attr_public_dns_name,
            description="Public DNS name (carrier IP) of the Wavelength instance",
        )
