"""
Provider implementations package.

Package Structure:
    providers/
    ├── __init__.py         # This file
    ├── deployer.py         # Five-stage provisioning pipeline
    └── aws/                # AWS implementation
        ├── provider.py     # AWSProvider class
        ├── clients.py      # boto3 session and client initialization
        ├── naming.py       # Derived resource names and ARNs
        ├── storage.py      # S3 buckets and archive upload
        ├── identity.py     # IAM role and inline policy
        ├── functions.py    # Lambda function and version
        └── cdn.py          # CloudFront distribution
"""
