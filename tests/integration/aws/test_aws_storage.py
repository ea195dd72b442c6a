"""
Integration tests for bucket provisioning and archive upload (moto).
"""

import pytest

import edge_provisioner.providers.deployer as deployer
from edge_provisioner.core.exceptions import ResourceCreationError

ALL_USERS = "http://acs.amazonaws.com/groups/global/AllUsers"


class TestBuckets:
    def test_create_buckets(self, mock_provider, moto_config):
        deployer.create_buckets(moto_config, mock_provider)

        names = {b["Name"] for b in mock_provider.clients["s3"].list_buckets()["Buckets"]}
        assert names == {moto_config.origin_bucket, moto_config.source_bucket}

    def test_buckets_are_public_read(self, mock_provider, moto_config):
        deployer.create_buckets(moto_config, mock_provider)

        acl = mock_provider.clients["s3"].get_bucket_acl(Bucket=moto_config.origin_bucket)
        public_grants = [
            g["Permission"] for g in acl["Grants"]
            if g["Grantee"].get("URI") == ALL_USERS
        ]
        assert public_grants == ["READ"]


class TestUpload:
    def test_archive_stored_under_source_zip(self, mock_provider, moto_config, archive_file):
        deployer.create_buckets(moto_config, mock_provider)

        key = deployer.upload_archive(moto_config, mock_provider)

        assert key == "source.zip"
        s3 = mock_provider.clients["s3"]
        body = s3.get_object(Bucket=moto_config.source_bucket, Key="source.zip")["Body"].read()
        assert body == archive_file.read_bytes()

    def test_upload_into_missing_bucket_is_fatal(self, mock_provider, moto_config):
        with pytest.raises(ResourceCreationError, match="Could not upload source zip"):
            deployer.upload_archive(moto_config, mock_provider)
