"""
AWS CloudProvider implementation.

Design Pattern: Abstract Factory (Provider Pattern)
    AWSProvider creates and manages a family of related AWS objects:
    - SDK clients (boto3 clients bound to one region)
    - One capability adapter per service used by the pipeline

Usage:
    provider = AWSProvider()
    provider.initialize_clients(EdgeConfig())

    # Access capabilities
    role_arn = provider.identity.create_role(...)

    # Access raw clients
    lambda_client = provider.clients["lambda"]
"""

from typing import Dict, Any, Optional

from edge_provisioner.core.context import EdgeConfig
from edge_provisioner.logger import logger


class AWSProvider:
    """
    AWS implementation of the CloudProvider protocol.

    Attributes:
        name: Always "aws" for this provider
        clients: Dictionary of initialized boto3 clients
    """

    name: str = "aws"

    def __init__(self):
        """Initialize AWS provider with empty state."""
        self._clients: Dict[str, Any] = {}
        self._region: str = ""
        self._buckets = None
        self._uploader = None
        self._identity = None
        self._functions = None
        self._cdn = None
        self._initialized = False

    @property
    def region(self) -> str:
        """Get the AWS region for this provider instance."""
        return self._region

    @property
    def clients(self) -> Dict[str, Any]:
        self._require_initialized()
        return self._clients

    @property
    def buckets(self):
        self._require_initialized()
        return self._buckets

    @property
    def uploader(self):
        self._require_initialized()
        return self._uploader

    @property
    def identity(self):
        self._require_initialized()
        return self._identity

    @property
    def functions(self):
        self._require_initialized()
        return self._functions

    @property
    def cdn(self):
        self._require_initialized()
        return self._cdn

    def _require_initialized(self) -> None:
        if not self._initialized:
            raise RuntimeError(
                "Provider not initialized. Call initialize_clients() first."
            )

    def initialize_clients(
        self,
        config: EdgeConfig,
        clients: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Initialize boto3 clients and capability adapters.

        Args:
            config: Provisioning configuration (region and names)
            clients: Pre-built clients keyed like create_aws_clients();
                created from the default credential chain when omitted

        Raises:
            ConfigurationError: If credentials cannot be resolved
        """
        from .cdn import CloudFrontCdnAdmin
        from .clients import create_aws_clients
        from .functions import LambdaFunctionAdmin
        from .identity import IAMIdentityAdmin
        from .storage import S3ArtifactUploader, S3BucketStore

        self._region = config.region

        if clients is None:
            clients = create_aws_clients(region=self._region)
        self._clients = clients

        self._buckets = S3BucketStore(clients["s3"])
        self._uploader = S3ArtifactUploader(clients["s3"])
        self._identity = IAMIdentityAdmin(clients["iam"])
        self._functions = LambdaFunctionAdmin(clients["lambda"])
        self._cdn = CloudFrontCdnAdmin(clients["cloudfront"])

        self._initialized = True
        logger.info(f"AWS session initialized for region {self._region}")
