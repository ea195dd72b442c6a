"""
Tests for the command-line entry point.
"""

import logging
from unittest.mock import MagicMock, patch

import edge_provisioner.main as main_module
from edge_provisioner.core.context import EdgeConfig, ProvisioningResult
from edge_provisioner.core.exceptions import ConfigurationError, ResourceCreationError
from tests.fakes import client_error


class TestMain:
    @patch("edge_provisioner.main.run")
    def test_success_exits_zero(self, mock_run):
        mock_run.return_value = ProvisioningResult()
        assert main_module.main() == 0
        mock_run.assert_called_once_with()

    @patch("edge_provisioner.main.run")
    def test_stage_failure_exits_non_zero(self, mock_run, caplog):
        mock_run.side_effect = ResourceCreationError(
            "s3_bucket", "origin", "buckets", "Could not create origin bucket",
            client_error("BucketAlreadyOwnedByYou", "already owned by you", "CreateBucket"),
        )

        assert main_module.main() == 1
        assert "Could not create origin bucket: " in caplog.text

    @patch("edge_provisioner.main.run")
    def test_missing_credentials_exits_non_zero(self, mock_run, caplog):
        mock_run.side_effect = ConfigurationError("Did you pass the credentials?", stage="session")

        assert main_module.main() == 1
        assert "Did you pass the credentials?" in caplog.text

    @patch("edge_provisioner.main.run")
    def test_failure_reported_as_single_error_line(self, mock_run, caplog):
        caplog.set_level(logging.DEBUG, logger="edge_provisioner")
        mock_run.side_effect = ConfigurationError("Did you pass the credentials?", stage="session")

        main_module.main()

        errors = [r for r in caplog.records if r.levelno >= logging.WARNING]
        assert [r.getMessage() for r in errors] == ["Did you pass the credentials? [stage=session]"]
        assert "Traceback" not in caplog.text


class TestRun:
    @patch("edge_provisioner.main.deployer.deploy_all")
    @patch("edge_provisioner.main.AWSProvider")
    def test_bootstraps_provider_then_deploys(self, mock_provider_cls, mock_deploy_all):
        provider = mock_provider_cls.return_value
        expected = ProvisioningResult(role_arn="arn:role", version_arn="arn:fn:1")
        mock_deploy_all.return_value = expected

        result = main_module.run()

        assert result is expected
        config = provider.initialize_clients.call_args.args[0]
        assert config == EdgeConfig()
        mock_deploy_all.assert_called_once_with(config, provider)

    @patch("edge_provisioner.main.deployer.deploy_all")
    @patch("edge_provisioner.main.AWSProvider")
    def test_deploy_not_attempted_when_bootstrap_fails(self, mock_provider_cls, mock_deploy_all):
        mock_provider_cls.return_value.initialize_clients.side_effect = ConfigurationError(
            "Did you pass the credentials?"
        )

        assert main_module.main() == 1
        mock_deploy_all.assert_not_called()
