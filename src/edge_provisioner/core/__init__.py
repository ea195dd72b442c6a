"""
Core abstractions for the edge provisioner.

Modules:
    protocols: Capability interfaces (BucketStore, FunctionAdmin, ...)
    context: EdgeConfig and ProvisioningResult
    exceptions: Custom exception types for provisioning operations

Usage:
    from edge_provisioner.core import EdgeConfig, DeploymentError

    config = EdgeConfig()
"""

from .protocols import (
    ArtifactUploader,
    BucketStore,
    CdnAdmin,
    CloudProvider,
    FunctionAdmin,
    IdentityAdmin,
)
from .context import EdgeConfig, ProvisioningResult
from .exceptions import DeploymentError, ConfigurationError, ResourceCreationError

__all__ = [
    # Protocols
    "ArtifactUploader",
    "BucketStore",
    "CdnAdmin",
    "CloudProvider",
    "FunctionAdmin",
    "IdentityAdmin",
    # Context
    "EdgeConfig",
    "ProvisioningResult",
    # Exceptions
    "DeploymentError",
    "ConfigurationError",
    "ResourceCreationError",
]
