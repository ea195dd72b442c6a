"""
End-to-end provisioning run against moto.
"""

import edge_provisioner.providers.deployer as deployer


class TestDeployAll:
    def test_happy_path(self, mock_provider, moto_config):
        result = deployer.deploy_all(moto_config, mock_provider)
        clients = mock_provider.clients

        buckets = clients["s3"].list_buckets()["Buckets"]
        assert len(buckets) == 2

        roles = clients["iam"].list_roles(PathPrefix="/service-role/")["Roles"]
        assert [r["RoleName"] for r in roles] == [moto_config.role_name]
        policies = clients["iam"].list_role_policies(RoleName=moto_config.role_name)["PolicyNames"]
        assert len(policies) == 1

        function = clients["lambda"].get_function(FunctionName=moto_config.function_name)
        assert function["Configuration"]["FunctionArn"] == result.function_arn
        assert function["Configuration"]["Role"] == result.role_arn
        assert function["Configuration"]["Handler"] == "index.handler"

        versions = clients["lambda"].list_versions_by_function(
            FunctionName=moto_config.function_name
        )["Versions"]
        assert sorted(v["Version"] for v in versions) == ["$LATEST", "1"]
        assert result.version_arn == result.function_arn + ":1"

        distributions = clients["cloudfront"].list_distributions()["DistributionList"]
        assert distributions["Quantity"] == 1
        assert distributions["Items"][0]["Id"] == result.distribution_id
