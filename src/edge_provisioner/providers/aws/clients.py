"""
AWS SDK session and client initialization.

Design Decision:
    We return a dictionary of clients rather than individual module-level
    variables. This allows the provider to manage client lifecycle and
    enables easy testing via mocking.

Usage:
    from edge_provisioner.providers.aws.clients import create_aws_clients

    clients = create_aws_clients(region="us-east-1")
    # clients["s3"], clients["iam"], clients["lambda"], clients["cloudfront"]
"""

from typing import Dict, Any

import boto3

from edge_provisioner.core.exceptions import ConfigurationError

STAGE = "session"


def create_aws_session(region: str) -> boto3.Session:
    """
    Create a boto3 session bound to region.

    Credentials are resolved through boto3's standard credential chain
    (environment, shared config files, instance metadata, ...).

    Raises:
        ConfigurationError: If no credentials can be resolved
    """
    session = boto3.Session(region_name=region)
    if session.get_credentials() is None:
        raise ConfigurationError("Did you pass the credentials?", stage=STAGE)
    return session


def create_aws_clients(region: str) -> Dict[str, Any]:
    """
    Create and return all AWS boto3 clients needed for provisioning.

    Args:
        region: AWS region every client is bound to

    Returns:
        Dictionary mapping service names to boto3 client instances.

    Client Keys:
        - s3: Simple Storage Service (buckets, archive upload)
        - iam: Identity and Access Management
        - lambda: Lambda functions
        - cloudfront: CloudFront distributions
    """
    session = create_aws_session(region)

    return {
        "s3": session.client("s3", region_name=region),
        "iam": session.client("iam", region_name=region),
        "lambda": session.client("lambda", region_name=region),
        "cloudfront": session.client("cloudfront", region_name=region),
    }
