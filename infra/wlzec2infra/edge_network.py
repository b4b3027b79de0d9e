"""Network construct for a VPC extended into an AWS Wavelength zone.

The VPC itself lives in the parent region. The Wavelength zone is reached
through a private subnet pinned to the zone, whose default route points
at a carrier gateway instead of a NAT or internet gateway.
"""

from logging import getLogger
from typing import List

import aws_cdk.aws_ec2 as ec2
from constructs import Construct

logger = getLogger(__name__)

ANY_IPV4_CIDR = "0.0.0.0/0"


class EdgeNetwork(Construct):
    """VPC with one public and one private subnet, plus a Wavelength subnet.

    The edge subnet is part of the construct's inputs rather than being
    patched into the VPC afterwards, so ``private_subnets`` and ``subnets``
    always include it.
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        *,
        edge_zone: str,
        cidr: str = "10.0.0.0/16",
        edge_subnet_cidr: str = "10.0.2.0/26",
        cidr_mask: int = 24,
    ) -> None:
        """Initialize the edge network.

        Args:
            scope: The parent construct.
            id: The construct ID.
            edge_zone: Name of the Wavelength zone, e.g. us-west-2-wl1-sfo-wlz-1.
            cidr: Address block of the VPC.
            edge_subnet_cidr: Address block of the Wavelength subnet. Must not
                overlap with the blocks CDK allocates to the regular subnets.
            cidr_mask: Mask of the regular public and private subnets.
        """
        super().__init__(scope, id)

        self.edge_zone = edge_zone

        self.subnet_configuration = [
            ec2.SubnetConfiguration(
                name="Public",
                subnet_type=ec2.SubnetType.PUBLIC,
                cidr_mask=cidr_mask,
            ),
            ec2.SubnetConfiguration(
                name="Private",
                subnet_type=ec2.SubnetType.PRIVATE_WITH_EGRESS,
                cidr_mask=cidr_mask,
            ),
        ]

        # Single parent-region AZ; the Wavelength zone is added separately below
        self.vpc = ec2.Vpc(
            self,
            "AppVPC",
            ip_addresses=ec2.IpAddresses.cidr(cidr),
            max_azs=1,
            subnet_configuration=self.subnet_configuration,
        )

        self.carrier_gateway = ec2.CfnCarrierGateway(
            self,
            "CarrierGateway",
            vpc_id=self.vpc.vpc_id,
        )

        self.edge_subnet = ec2.PrivateSubnet(
            self,
            "EdgePrivateSubnet",
            availability_zone=edge_zone,
            cidr_block=edge_subnet_cidr,
            vpc_id=self.vpc.vpc_id,
            map_public_ip_on_launch=False,
        )

        # Default traffic from the edge subnet leaves through the carrier network
        self.carrier_route = ec2.CfnRoute(
            self,
            "EdgeCarrierRoute",
            destination_cidr_block=ANY_IPV4_CIDR,
            route_table_id=self.edge_subnet.route_table.route_table_id,
            carrier_gateway_id=self.carrier_gateway.ref,
        )

        logger.info(
            f"Edge network: subnet {edge_subnet_cidr} in {edge_zone}, VPC {cidr}"
        )

    @property
    def public_subnets(self) -> List[ec2.ISubnet]:
        return list(self.vpc.public_subnets)

    @property
    def private_subnets(self) -> List[ec2.ISubnet]:
        """Private subnets of the parent region followed by the edge subnet."""
        return [*self.vpc.private_subnets, self.edge_subnet]

    @property
    def subnets(self) -> List[ec2.ISubnet]:
        return self.public_subnets + self.private_subnets
