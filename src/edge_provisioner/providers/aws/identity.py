"""
IAM role and inline policy for the edge function.

The trust policy must name both lambda.amazonaws.com and
edgelambda.amazonaws.com: replicas of an edge function run under the
edge service principal.
"""

from typing import Any

from edge_provisioner.logger import logger


class IAMIdentityAdmin:
    """IdentityAdmin backed by an IAM client."""

    def __init__(self, iam_client: Any):
        self._iam = iam_client

    def create_role(self, name: str, path: str, trust_policy: str) -> str:
        """Creates the role and returns its ARN."""
        response = self._iam.create_role(
            Path=path,
            RoleName=name,
            AssumeRolePolicyDocument=trust_policy,
        )
        role_arn = response["Role"]["Arn"]
        logger.info(f"Created IAM role: {name}")
        return role_arn

    def put_role_policy(self, role_name: str, policy_name: str, document: str) -> None:
        self._iam.put_role_policy(
            RoleName=role_name,
            PolicyName=policy_name,
            PolicyDocument=document,
        )
        logger.info(f"Attached inline policy {policy_name} to role {role_name}")
