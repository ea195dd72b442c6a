"""
Provisioning configuration and result classes.

Instead of reading process-wide literals, every stage receives an EdgeConfig
holding the fixed identifiers of the deployment. The defaults are the names
of the deployed system; tests construct their own EdgeConfig to inject
alternative names.

Design Pattern: Dependency Injection
    - EdgeConfig is built once at startup and never mutated
    - ProvisioningResult collects the values threaded between stages
"""

import os
from dataclasses import dataclass, fields
from typing import Optional

import edge_provisioner.constants as CONSTANTS
from edge_provisioner.core.exceptions import ConfigurationError


@dataclass(frozen=True)
class EdgeConfig:
    """
    Fixed identifiers for the Lambda@Edge deployment.

    Attributes:
        region: AWS region every client is bound to
        origin_bucket: S3 bucket used as the CloudFront origin
        source_bucket: S3 bucket holding the function archive
        bucket_acl: Canned ACL applied to both buckets
        role_name: IAM role assumed by the function
        role_path: IAM path the role is created under
        policy_name: Name of the inline execution policy
        function_name: Lambda function name
        function_handler: Handler entry point inside the archive
        function_runtime: Lambda runtime tag
        version_description: Description of the published version
        archive_path: Local path of the pre-built function archive
        origin_id: CloudFront origin id, also the cache behavior target
        propagation_wait_seconds: Delay between role setup and function creation
        function_create_attempts: Attempts for create_function (1 = no retry)
        function_create_backoff_seconds: Base delay between create_function attempts
    """

    region: str = CONSTANTS.AWS_REGION
    origin_bucket: str = CONSTANTS.ORIGIN_BUCKET_NAME
    source_bucket: str = CONSTANTS.SOURCE_CODE_BUCKET_NAME
    bucket_acl: str = CONSTANTS.BUCKET_ACL_PUBLIC
    role_name: str = CONSTANTS.IAM_ROLE_NAME
    role_path: str = CONSTANTS.IAM_ROLE_PATH
    policy_name: str = CONSTANTS.IAM_INLINE_POLICY_NAME
    function_name: str = CONSTANTS.LAMBDA_FUNCTION_NAME
    function_handler: str = CONSTANTS.LAMBDA_HANDLER
    function_runtime: str = CONSTANTS.LAMBDA_RUNTIME
    version_description: str = CONSTANTS.LAMBDA_VERSION_DESCRIPTION
    archive_path: str = CONSTANTS.SOURCE_ARCHIVE_PATH
    origin_id: str = CONSTANTS.CLOUDFRONT_ORIGIN_ID
    propagation_wait_seconds: float = CONSTANTS.IAM_PROPAGATION_WAIT_SECONDS
    function_create_attempts: int = CONSTANTS.LAMBDA_CREATE_ATTEMPTS
    function_create_backoff_seconds: float = CONSTANTS.LAMBDA_CREATE_BACKOFF_SECONDS

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if f.type is str and (not isinstance(value, str) or not value):
                raise ConfigurationError(f"{f.name} must be a non-empty string")

        if self.propagation_wait_seconds < 0:
            raise ConfigurationError("propagation_wait_seconds must not be negative")
        if self.function_create_attempts < 1:
            raise ConfigurationError("function_create_attempts must be at least 1")
        if self.function_create_backoff_seconds < 0:
            raise ConfigurationError("function_create_backoff_seconds must not be negative")

    @property
    def archive_key(self) -> str:
        """S3 key of the uploaded archive (basename of the local path)."""
        return os.path.basename(self.archive_path)


@dataclass
class ProvisioningResult:
    """
    Values produced by the pipeline stages.

    Filled in stage by stage; a field stays None when the pipeline
    stopped before the stage that produces it.
    """

    archive_key: Optional[str] = None
    role_arn: Optional[str] = None
    function_arn: Optional[str] = None
    version_arn: Optional[str] = None
    distribution_id: Optional[str] = None
    distribution_domain_name: Optional[str] = None
