"""
AWS resource naming conventions.

Most identifiers of this deployment are fixed constants carried by EdgeConfig.
This module derives the few values composed from them: the origin's S3 DNS
name, the uploaded archive key and the published-version ARN.

Usage:
    from edge_provisioner.providers.aws.naming import AWSNaming

    naming = AWSNaming(EdgeConfig())
    naming.origin_domain_name()  # "<origin-bucket>.s3.amazonaws.com"
"""

from typing import Optional

import edge_provisioner.constants as CONSTANTS
from edge_provisioner.core.context import EdgeConfig


class AWSNaming:
    """
    Derives AWS resource names from an EdgeConfig.

    Attributes:
        config: The configuration the names are derived from
    """

    def __init__(self, config: EdgeConfig):
        self._config = config

    @property
    def config(self) -> EdgeConfig:
        """Get the configuration backing this naming helper."""
        return self._config

    # ==========================================
    # S3
    # ==========================================

    def origin_domain_name(self) -> str:
        """Default S3 DNS name of the origin bucket, used as CloudFront origin."""
        return f"{self._config.origin_bucket}.{CONSTANTS.S3_DOMAIN_SUFFIX}"

    def archive_key(self) -> str:
        """S3 key of the function archive (basename of the local path)."""
        return self._config.archive_key

    # ==========================================
    # Lambda
    # ==========================================

    def version_arn(self, function_arn: str, version: Optional[str] = None) -> str:
        """
        Qualified ARN of a published function version.

        Args:
            function_arn: Unqualified function ARN
            version: Version number returned by publish_version; the first
                version ("1") is assumed when missing

        Returns:
            The ARN suffixed with ":<version>" (e.g. "...:function:name:1")
        """
        return f"{function_arn}:{version or CONSTANTS.LAMBDA_FIRST_VERSION}"
