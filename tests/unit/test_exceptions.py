"""
Unit tests for the exception hierarchy.
"""

from edge_provisioner.core.exceptions import (
    ConfigurationError,
    DeploymentError,
    ResourceCreationError,
)
from tests.fakes import client_error


class TestResourceCreationError:
    def test_message_starts_with_stage_diagnostic(self):
        cause = client_error("BucketAlreadyOwnedByYou", "already owned by you", "CreateBucket")
        error = ResourceCreationError(
            "s3_bucket", "origin", "buckets", "Could not create origin bucket", cause
        )
        assert str(error).startswith("Could not create origin bucket: ")
        assert "already owned by you" in str(error)
        assert "[stage=buckets]" in str(error)

    def test_attributes(self):
        error = ResourceCreationError("iam_role", "role", "identity", "Could not create IAM role")
        assert error.resource_type == "iam_role"
        assert error.resource_name == "role"
        assert error.stage == "identity"
        assert error.original_error is None
        assert error.message == "Could not create IAM role"

    def test_is_deployment_error(self):
        error = ResourceCreationError("iam_role", "role", "identity", "Could not create IAM role")
        assert isinstance(error, DeploymentError)


def test_configuration_error_without_stage():
    error = ConfigurationError("Did you pass the credentials?")
    assert str(error) == "Did you pass the credentials?"
    assert isinstance(error, DeploymentError)
