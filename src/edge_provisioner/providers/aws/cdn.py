"""
CloudFront distribution wired to the edge function.

The distribution has a single S3 origin and a default cache behavior with
exactly one Lambda@Edge association on the origin-request event. The origin
bucket name doubles as caller reference, which CloudFront uses to dedupe
creation retries.
"""

from typing import Any, Dict, Tuple

import edge_provisioner.constants as CONSTANTS
from edge_provisioner.logger import logger


def build_distribution_config(
    origin_bucket: str,
    origin_domain_name: str,
    origin_id: str,
    version_arn: str,
) -> Dict[str, Any]:
    """
    Build the DistributionConfig payload for create_distribution.

    Args:
        origin_bucket: Origin bucket name, used as caller reference and comment
        origin_domain_name: S3 DNS name of the origin bucket
        origin_id: Id of the single origin and the cache behavior target
        version_arn: Qualified ARN of the published function version

    Returns:
        The DistributionConfig dictionary
    """
    return {
        "CallerReference": origin_bucket,
        "Comment": origin_bucket,
        "Enabled": True,
        "Origins": {
            "Quantity": 1,
            "Items": [
                {
                    "Id": origin_id,
                    "DomainName": origin_domain_name,
                    # Public origin, no origin access identity
                    "S3OriginConfig": {"OriginAccessIdentity": ""},
                },
            ],
        },
        "DefaultCacheBehavior": {
            "MinTTL": CONSTANTS.CLOUDFRONT_MIN_TTL,
            "Compress": True,
            "TargetOriginId": origin_id,
            "ViewerProtocolPolicy": CONSTANTS.CLOUDFRONT_VIEWER_PROTOCOL_POLICY,
            "LambdaFunctionAssociations": {
                "Quantity": 1,
                "Items": [
                    {
                        "LambdaFunctionARN": version_arn,
                        "EventType": CONSTANTS.CLOUDFRONT_EDGE_EVENT_TYPE,
                        "IncludeBody": False,
                    },
                ],
            },
            "ForwardedValues": {
                "QueryString": False,
                "Cookies": {"Forward": CONSTANTS.CLOUDFRONT_COOKIE_FORWARD},
            },
            "TrustedSigners": {
                "Enabled": False,
                "Quantity": 0,
            },
        },
    }


class CloudFrontCdnAdmin:
    """CdnAdmin backed by a CloudFront client."""

    def __init__(self, cloudfront_client: Any):
        self._cloudfront = cloudfront_client

    def create_distribution(self, distribution_config: Dict[str, Any]) -> Tuple[str, str]:
        response = self._cloudfront.create_distribution(
            DistributionConfig=distribution_config
        )
        distribution = response["Distribution"]
        logger.info(
            f"Created CloudFront distribution {distribution['Id']} "
            f"({distribution['DomainName']})"
        )
        return distribution["Id"], distribution["DomainName"]
