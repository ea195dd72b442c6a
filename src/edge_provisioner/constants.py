# ==========================================
# 1. Region
# ==========================================
# Lambda@Edge associations are only accepted from functions in us-east-1.
AWS_REGION = "us-east-1"

# ==========================================
# 2. S3 Buckets
# ==========================================
ORIGIN_BUCKET_NAME = "medium-lambda-go-sdk-origin-white-1"
SOURCE_CODE_BUCKET_NAME = "medium-lambda-go-sdk-source-code-white-1"
BUCKET_ACL_PUBLIC = "public-read"
S3_DOMAIN_SUFFIX = "s3.amazonaws.com"

# ==========================================
# 3. Function Archive
# ==========================================
SOURCE_ARCHIVE_PATH = "source.zip"

# ==========================================
# 4. IAM
# ==========================================
IAM_ROLE_NAME = "medium-lambda-go-sdk-role-white-11"
IAM_ROLE_PATH = "/service-role/"
IAM_INLINE_POLICY_NAME = "stackers-lambda-exec-policy"
IAM_PROPAGATION_WAIT_SECONDS = 20

AWS_SERVICE_PRINCIPAL_LAMBDA = "lambda.amazonaws.com"
AWS_SERVICE_PRINCIPAL_EDGE_LAMBDA = "edgelambda.amazonaws.com"

# Sent verbatim to IAM.
IAM_TRUST_POLICY_DOCUMENT = (
    "{\"Version\": \"2012-10-17\",\"Statement\": [{\"Effect\": \"Allow\","
    "\"Principal\": {\"Service\": [\"lambda.amazonaws.com\",\"edgelambda.amazonaws.com\"]},"
    "\"Action\": \"sts:AssumeRole\"}]}"
)
IAM_EXECUTION_POLICY_DOCUMENT = (
    "{\"Version\": \"2012-10-17\", \"Statement\": [ { \"Effect\": \"Allow\", "
    "\"Action\": [ \"logs:CreateLogGroup\", \"logs:CreateLogStream\", \"logs:PutLogEvents\" ], "
    "\"Resource\": [ \"arn:aws:logs:*:*:*\" ] } ] }"
)

# ==========================================
# 5. Lambda
# ==========================================
LAMBDA_FUNCTION_NAME = "medium-lambda-go-sdk-function-white-11"
LAMBDA_HANDLER = "index.handler"
LAMBDA_RUNTIME = "nodejs12.x"
LAMBDA_VERSION_DESCRIPTION = "Example function for Medium"
LAMBDA_FIRST_VERSION = "1"
LAMBDA_CREATE_ATTEMPTS = 1
LAMBDA_CREATE_BACKOFF_SECONDS = 5.0

# ==========================================
# 6. CloudFront
# ==========================================
CLOUDFRONT_ORIGIN_ID = "ORIGIN_ID"
CLOUDFRONT_MIN_TTL = 10
CLOUDFRONT_VIEWER_PROTOCOL_POLICY = "redirect-to-https"
CLOUDFRONT_EDGE_EVENT_TYPE = "origin-request"
CLOUDFRONT_COOKIE_FORWARD = "none"
