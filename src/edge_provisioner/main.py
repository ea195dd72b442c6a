"""
Edge Provisioner - CLI Entry Point.

Takes no arguments. Bootstraps an AWS session in us-east-1, runs the
provisioning pipeline once and logs what was created. Any failure is fatal
and ends the process with exit code 1.
"""

import sys
from typing import Optional

from edge_provisioner.core.context import EdgeConfig, ProvisioningResult
from edge_provisioner.core.exceptions import DeploymentError
from edge_provisioner.logger import logger
from edge_provisioner.providers.aws.provider import AWSProvider
import edge_provisioner.providers.deployer as deployer


def _log_summary(config: EdgeConfig, result: ProvisioningResult) -> None:
    logger.info("Created resources:")
    logger.info(f"  Origin bucket:      {config.origin_bucket}")
    logger.info(f"  Source bucket:      {config.source_bucket} (key: {result.archive_key})")
    logger.info(f"  IAM role:           {result.role_arn}")
    logger.info(f"  Function version:   {result.version_arn}")
    logger.info(f"  Distribution:       {result.distribution_id} ({result.distribution_domain_name})")


def run(config: Optional[EdgeConfig] = None) -> ProvisioningResult:
    """
    Bootstrap the AWS session and provision every resource.

    Raises:
        DeploymentError: If credentials are missing or any stage fails
    """
    config = config or EdgeConfig()

    provider = AWSProvider()
    provider.initialize_clients(config)

    result = deployer.deploy_all(config, provider)
    _log_summary(config, result)
    return result


def main() -> int:
    logger.info("Hello Lambda")
    try:
        run()
    except DeploymentError as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
