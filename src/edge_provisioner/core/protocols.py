"""
Protocol definitions for the edge provisioner.

Each pipeline stage talks to a distinct AWS service. The stage only depends on
the narrow capability it needs, so the pipeline can run against the boto3
adapters in providers/aws or against an in-memory fake in tests.

Design Pattern: Strategy Pattern + Abstract Factory
    - BucketStore, ArtifactUploader, IdentityAdmin, FunctionAdmin, CdnAdmin:
      one capability per service
    - CloudProvider: Abstract Factory bundling the five capabilities

Implementations raise the SDK's own exceptions (botocore ClientError for AWS).
Translating them into DeploymentError is the pipeline's job.
"""

from typing import Protocol, runtime_checkable, Dict, Any, Tuple


@runtime_checkable
class BucketStore(Protocol):
    """Creates object-storage buckets."""

    def create_bucket(self, name: str, acl: str) -> None:
        ...


@runtime_checkable
class ArtifactUploader(Protocol):
    """Streams a local file into a bucket."""

    def upload(self, path: str, bucket: str, key: str) -> None:
        """
        Upload the file at path to bucket/key.

        The local file handle must be released on every exit path,
        including when the upload itself fails.
        """
        ...


@runtime_checkable
class IdentityAdmin(Protocol):
    """Creates roles and attaches inline policies."""

    def create_role(self, name: str, path: str, trust_policy: str) -> str:
        """Create the role and return its ARN."""
        ...

    def put_role_policy(self, role_name: str, policy_name: str, document: str) -> None:
        ...


@runtime_checkable
class FunctionAdmin(Protocol):
    """Creates functions and publishes versions."""

    def create_function(
        self,
        name: str,
        handler: str,
        runtime: str,
        role_arn: str,
        code_bucket: str,
        code_key: str,
    ) -> str:
        """Create the function and return its ARN."""
        ...

    def publish_version(self, function_arn: str, description: str) -> str:
        """Publish an immutable version and return its version number."""
        ...


@runtime_checkable
class CdnAdmin(Protocol):
    """Creates CDN distributions."""

    def create_distribution(self, distribution_config: Dict[str, Any]) -> Tuple[str, str]:
        """Create the distribution and return (distribution id, domain name)."""
        ...


@runtime_checkable
class CloudProvider(Protocol):
    """
    Protocol bundling the capabilities the pipeline needs.

    Example Implementation:
        class AWSProvider:
            name = "aws"

            def initialize_clients(self, config):
                self._clients = create_aws_clients(config.region)
                self.buckets = S3BucketStore(self._clients["s3"])
                ...
    """

    @property
    def name(self) -> str:
        ...

    @property
    def buckets(self) -> BucketStore:
        ...

    @property
    def uploader(self) -> ArtifactUploader:
        ...

    @property
    def identity(self) -> IdentityAdmin:
        ...

    @property
    def functions(self) -> FunctionAdmin:
        ...

    @property
    def cdn(self) -> CdnAdmin:
        ...
