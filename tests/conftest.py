import os
import pytest

from edge_provisioner.core.context import EdgeConfig
from tests.fakes import FakeCloud, REGION


@pytest.fixture(scope="function", autouse=True)
def mock_env_vars():
    """Set mock environment variables to prevent accidental cloud calls."""
    os.environ["AWS_ACCESS_KEY_ID"] = "testing"
    os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
    os.environ["AWS_SECURITY_TOKEN"] = "testing"
    os.environ["AWS_SESSION_TOKEN"] = "testing"
    os.environ["AWS_DEFAULT_REGION"] = REGION


@pytest.fixture(autouse=True)
def mock_sleep(monkeypatch):
    """Skip time.sleep calls to speed up tests."""
    monkeypatch.setattr("time.sleep", lambda x: None)


@pytest.fixture
def fake_cloud(monkeypatch):
    """FakeCloud enforcing a 20 second IAM propagation delay."""
    cloud = FakeCloud(propagation_seconds=20)
    monkeypatch.setattr("time.sleep", cloud.clock.sleep)
    return cloud


@pytest.fixture
def archive_file(tmp_path):
    """A pre-built function archive on disk."""
    path = tmp_path / "source.zip"
    path.write_bytes(b"PK\x03\x04fake-edge-function")
    return path


@pytest.fixture
def edge_config(archive_file):
    """Default EdgeConfig pointing at the temporary archive."""
    return EdgeConfig(archive_path=str(archive_file))
