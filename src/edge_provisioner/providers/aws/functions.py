"""
Lambda function creation and version publishing.

Edge associations only accept a published (immutable) version, never
$LATEST or an alias.
"""

from typing import Any

from botocore.exceptions import ClientError

from edge_provisioner.logger import logger


def is_role_propagation_error(error: Exception) -> bool:
    """
    Check whether a create_function failure is caused by IAM propagation.

    Right after creation, Lambda may reject a role with
    InvalidParameterValueException ("The role defined for the function
    cannot be assumed by Lambda."). The same call succeeds once the role
    has propagated, so this error is the only retriable one.
    """
    if not isinstance(error, ClientError):
        return False
    details = error.response.get("Error", {})
    return (
        details.get("Code") == "InvalidParameterValueException"
        and "cannot be assumed" in details.get("Message", "")
    )


class LambdaFunctionAdmin:
    """FunctionAdmin backed by a Lambda client."""

    def __init__(self, lambda_client: Any):
        self._lambda = lambda_client

    def create_function(
        self,
        name: str,
        handler: str,
        runtime: str,
        role_arn: str,
        code_bucket: str,
        code_key: str,
    ) -> str:
        """Creates the function from an archive in S3 and returns its ARN."""
        response = self._lambda.create_function(
            FunctionName=name,
            Handler=handler,
            Runtime=runtime,
            Role=role_arn,
            Code={
                "S3Bucket": code_bucket,
                "S3Key": code_key,
            },
        )
        function_arn = response["FunctionArn"]
        logger.info(f"Created Lambda function: {name}")
        return function_arn

    def publish_version(self, function_arn: str, description: str) -> str:
        """Publishes a version and returns its number (e.g. "1")."""
        response = self._lambda.publish_version(
            FunctionName=function_arn,
            Description=description,
        )
        version = response.get("Version")
        logger.info(f"Published version {version} of {function_arn}")
        return version
