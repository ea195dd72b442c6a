"""
AWS Provider package.

Implements the capability protocols from core.protocols on top of boto3.

Usage:
    from edge_provisioner.providers.aws import AWSProvider

    provider = AWSProvider()
    provider.initialize_clients(EdgeConfig())
    role_arn = provider.identity.create_role(...)
"""

from .provider import AWSProvider

__all__ = ["AWSProvider"]
