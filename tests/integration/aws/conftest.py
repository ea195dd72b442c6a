import pytest
from moto import mock_aws

from edge_provisioner.core.context import EdgeConfig
from edge_provisioner.providers.aws.provider import AWSProvider


@pytest.fixture(scope="function")
def moto_config(archive_file):
    """EdgeConfig for moto runs; no propagation wait needed."""
    return EdgeConfig(archive_path=str(archive_file), propagation_wait_seconds=0)


@pytest.fixture(scope="function")
def mock_provider(moto_config):
    """
    AWSProvider whose boto3 clients talk to moto.

    Clients are built through the real session bootstrap, using the
    dummy credentials set by the root conftest.
    """
    with mock_aws():
        provider = AWSProvider()
        provider.initialize_clients(moto_config)
        yield provider
