"""
Lambda@Edge provisioner.

Creates, in one pass, the AWS resources for an edge function deployment:
two public-read S3 buckets, an IAM role with an inline execution policy,
a Lambda function with a published version, and a CloudFront distribution
invoking that version on origin requests.
"""

__version__ = "0.1.0"
