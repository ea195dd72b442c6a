"""
S3 bucket provisioning and archive upload.

Resources managed:
- Origin bucket (CloudFront origin)
- Source-code bucket (function archive)
- The archive object inside the source-code bucket
"""

from typing import Any

from edge_provisioner.logger import logger


class S3BucketStore:
    """BucketStore backed by an S3 client."""

    def __init__(self, s3_client: Any):
        self._s3 = s3_client

    def create_bucket(self, name: str, acl: str) -> None:
        """
        Create a bucket with a canned ACL.

        There is no pre-check for prior existence; an existing bucket makes
        S3 raise (BucketAlreadyExists / BucketAlreadyOwnedByYou).
        """
        self._s3.create_bucket(Bucket=name, ACL=acl)
        logger.info(f"Created S3 bucket: {name}")


class S3ArtifactUploader:
    """
    ArtifactUploader backed by boto3's managed transfer.

    upload_fileobj switches to a multipart upload above the transfer
    threshold, so archives larger than a single PUT are supported.
    """

    def __init__(self, s3_client: Any):
        self._s3 = s3_client

    def upload(self, path: str, bucket: str, key: str) -> None:
        with open(path, "rb") as archive:
            self._s3.upload_fileobj(archive, bucket, key)
        logger.info(f"Uploaded {path} to s3://{bucket}/{key}")
