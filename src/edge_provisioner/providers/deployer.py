"""
Edge Deployer - Lambda@Edge Provisioning Pipeline.

This module runs the five provisioning stages in strict order. Each stage
depends on the output of the previous one:

    1. Session bootstrap   (AWSProvider.initialize_clients, done by the caller)
    2. Bucket provisioning  -> origin + source-code buckets
    3. Artifact upload      -> archive key
    4. Identity setup       -> role ARN, then propagation wait
    5. Function + CDN       -> function ARN, version ARN, distribution

Every failure is fatal: the SDK error is wrapped into a ResourceCreationError
naming the stage and propagated. Nothing created before the failure is
cleaned up.

Usage:
    provider = AWSProvider()
    provider.initialize_clients(config)
    result = deploy_all(config, provider)
"""

import time
from typing import TYPE_CHECKING, Tuple

from boto3.exceptions import Boto3Error
from botocore.exceptions import BotoCoreError, ClientError

import edge_provisioner.constants as CONSTANTS
from edge_provisioner.core.context import EdgeConfig, ProvisioningResult
from edge_provisioner.core.exceptions import ResourceCreationError
from edge_provisioner.logger import logger
from edge_provisioner.providers.aws.cdn import build_distribution_config
from edge_provisioner.providers.aws.functions import is_role_propagation_error
from edge_provisioner.providers.aws.naming import AWSNaming

if TYPE_CHECKING:
    from edge_provisioner.core.protocols import CloudProvider

# upload_fileobj reports failed transfers as boto3 S3UploadFailedError.
SDK_ERRORS = (ClientError, BotoCoreError, Boto3Error)


# ==========================================
# 2. Bucket Provisioning
# ==========================================

def create_buckets(config: EdgeConfig, provider: 'CloudProvider') -> None:
    """Creates the origin bucket and the source-code bucket."""
    for resource_name, description in [
        (config.origin_bucket, "Could not create origin bucket"),
        (config.source_bucket, "Could not create source code bucket"),
    ]:
        try:
            provider.buckets.create_bucket(resource_name, config.bucket_acl)
        except SDK_ERRORS as e:
            raise ResourceCreationError(
                "s3_bucket", resource_name, "buckets", description, e
            ) from e

    logger.info("✓ Buckets created")


# ==========================================
# 3. Artifact Upload
# ==========================================

def upload_archive(config: EdgeConfig, provider: 'CloudProvider') -> str:
    """
    Uploads the local function archive to the source-code bucket.

    Returns:
        The S3 key of the uploaded archive
    """
    key = config.archive_key
    try:
        provider.uploader.upload(config.archive_path, config.source_bucket, key)
    except OSError as e:
        raise ResourceCreationError(
            "s3_object", key, "upload", "Could not load source zip", e
        ) from e
    except SDK_ERRORS as e:
        raise ResourceCreationError(
            "s3_object", key, "upload", "Could not upload source zip", e
        ) from e

    logger.info(f"✓ Archive uploaded: s3://{config.source_bucket}/{key}")
    return key


# ==========================================
# 4. Identity Setup
# ==========================================

def create_identity(config: EdgeConfig, provider: 'CloudProvider') -> str:
    """
    Creates the function role and attaches the inline execution policy.

    Returns:
        The role ARN
    """
    try:
        role_arn = provider.identity.create_role(
            config.role_name,
            config.role_path,
            CONSTANTS.IAM_TRUST_POLICY_DOCUMENT,
        )
    except SDK_ERRORS as e:
        raise ResourceCreationError(
            "iam_role", config.role_name, "identity", "Could not create IAM role", e
        ) from e

    try:
        provider.identity.put_role_policy(
            config.role_name,
            config.policy_name,
            CONSTANTS.IAM_EXECUTION_POLICY_DOCUMENT,
        )
    except SDK_ERRORS as e:
        raise ResourceCreationError(
            "iam_role_policy", config.policy_name, "identity",
            "Could not put role policy", e
        ) from e

    logger.info(f"✓ IAM role ready: {role_arn}")
    return role_arn


def wait_for_propagation(config: EdgeConfig) -> None:
    """Gives IAM time to propagate the new role to Lambda."""
    logger.info("Waiting for propagation...")
    time.sleep(config.propagation_wait_seconds)


# ==========================================
# 5. Function + Distribution
# ==========================================

def _create_function_with_retry(
    config: EdgeConfig,
    provider: 'CloudProvider',
    role_arn: str
) -> str:
    attempts = config.function_create_attempts
    for attempt in range(1, attempts + 1):
        try:
            return provider.functions.create_function(
                config.function_name,
                config.function_handler,
                config.function_runtime,
                role_arn,
                config.source_bucket,
                config.archive_key,
            )
        except ClientError as e:
            if attempt == attempts or not is_role_propagation_error(e):
                raise
            delay = config.function_create_backoff_seconds * attempt
            logger.warning(
                f"Role not assumable yet (attempt {attempt}/{attempts}), "
                f"retrying in {delay}s"
            )
            time.sleep(delay)


def create_edge_function(
    config: EdgeConfig,
    provider: 'CloudProvider',
    role_arn: str
) -> Tuple[str, str]:
    """
    Creates the function and publishes its first version.

    Returns:
        (function ARN, published version ARN)
    """
    naming = AWSNaming(config)

    try:
        function_arn = _create_function_with_retry(config, provider, role_arn)
    except SDK_ERRORS as e:
        raise ResourceCreationError(
            "lambda_function", config.function_name, "function",
            "Could not create lambda function", e
        ) from e

    try:
        version = provider.functions.publish_version(
            function_arn, config.version_description
        )
    except SDK_ERRORS as e:
        raise ResourceCreationError(
            "lambda_version", config.function_name, "function",
            "Could not publish function version", e
        ) from e

    version_arn = naming.version_arn(function_arn, version)
    logger.info(f"✓ Function version published: {version_arn}")
    return function_arn, version_arn


def create_distribution(
    config: EdgeConfig,
    provider: 'CloudProvider',
    version_arn: str
) -> Tuple[str, str]:
    """
    Creates the CloudFront distribution invoking version_arn on origin requests.

    Returns:
        (distribution id, distribution domain name)
    """
    naming = AWSNaming(config)
    distribution_config = build_distribution_config(
        origin_bucket=config.origin_bucket,
        origin_domain_name=naming.origin_domain_name(),
        origin_id=config.origin_id,
        version_arn=version_arn,
    )

    try:
        distribution_id, domain_name = provider.cdn.create_distribution(
            distribution_config
        )
    except SDK_ERRORS as e:
        raise ResourceCreationError(
            "cloudfront_distribution", config.origin_bucket, "distribution",
            "Could not create CDN", e
        ) from e

    logger.info(f"✓ Distribution created: {distribution_id}")
    return distribution_id, domain_name


# ==========================================
# Full Pipeline
# ==========================================

def deploy_all(config: EdgeConfig, provider: 'CloudProvider') -> ProvisioningResult:
    """
    Run stages 2-5 against an initialized provider.

    Args:
        config: Provisioning configuration
        provider: Provider exposing the five capabilities

    Returns:
        ProvisioningResult with every produced identifier

    Raises:
        ResourceCreationError: On the first failing stage
    """
    logger.info(f"Provisioning Lambda@Edge deployment via provider: {provider.name}")
    result = ProvisioningResult()

    create_buckets(config, provider)
    result.archive_key = upload_archive(config, provider)
    result.role_arn = create_identity(config, provider)
    wait_for_propagation(config)
    result.function_arn, result.version_arn = create_edge_function(
        config, provider, result.role_arn
    )
    result.distribution_id, result.distribution_domain_name = create_distribution(
        config, provider, result.version_arn
    )

    logger.info("✓ Provisioning complete")
    return result
