"""
Custom exceptions for the edge provisioner.

Every failure in the pipeline is fatal. Stage functions wrap the underlying
SDK error into one of these exceptions so the entry point can print a short
diagnostic naming the stage and exit non-zero.

Exception Hierarchy:
    DeploymentError (base)
    ├── ConfigurationError - Invalid configuration or unresolved credentials
    └── ResourceCreationError - Failed to create cloud resource
"""

from typing import Optional


class DeploymentError(Exception):
    """
    Base exception for all provisioning errors.

    Attributes:
        message: Human-readable error description
        stage: Optional pipeline stage where the error occurred
    """

    def __init__(self, message: str, stage: Optional[str] = None):
        self.message = message
        self.stage = stage

        if stage:
            full_message = f"{message} [stage={stage}]"
        else:
            full_message = message

        super().__init__(full_message)


class ConfigurationError(DeploymentError):
    """
    Raised when configuration is invalid or credentials cannot be resolved.

    Example:
        >>> EdgeConfig(origin_bucket="")
        ConfigurationError: origin_bucket must be a non-empty string
    """

    def __init__(self, message: str, stage: Optional[str] = None):
        super().__init__(message, stage=stage)


class ResourceCreationError(DeploymentError):
    """
    Raised when a cloud resource fails to create.

    The message starts with the stage diagnostic (e.g. "Could not create
    origin bucket") followed by the provider's own error message.

    Attributes:
        resource_type: Type of resource (e.g., "s3_bucket", "lambda_function")
        resource_name: Name of the resource that failed
        description: Short diagnostic identifying the failed step
        original_error: The underlying SDK exception
    """

    def __init__(
        self,
        resource_type: str,
        resource_name: str,
        stage: str,
        description: str,
        original_error: Optional[Exception] = None
    ):
        self.resource_type = resource_type
        self.resource_name = resource_name
        self.description = description
        self.original_error = original_error

        message = description
        if original_error:
            message += f": {str(original_error)}"

        super().__init__(message, stage=stage)
