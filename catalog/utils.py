"""Utility functions for the catalog package."""

from typing import Any

import boto3
from botocore.credentials import Credentials


def get_aws_credentials(
    *,
    profile: str | None = None,
    assume_role: str | None = None,
    region: str = "us-east-1",
    role_session_name: str = "catalog-cli",
) -> Credentials:
    """Get AWS credentials, optionally from a profile or by assuming a role.

    Args:
        profile: Optional AWS profile name
        assume_role: Optional IAM role ARN to assume
        region: AWS region (default: us-east-1)
        role_session_name: Name of the role session (default: catalog-cli)

    Returns:
        Credentials object

    Raises:
        Exception: If role assumption fails or credentials cannot be obtained

    """
    session = boto3.Session(profile_name=profile) if profile else boto3.Session()

    if assume_role:
        sts_client = session.client("sts", region_name=region)

        try:
            response = sts_client.assume_role(
                RoleArn=assume_role,
                RoleSessionName=role_session_name,
            )
        except Exception as e:
            raise Exception(f"Failed to assume role {assume_role}: {e!s}") from e

        credentials = response["Credentials"]
        return Credentials(
            access_key=credentials["AccessKeyId"],
            secret_key=credentials["SecretAccessKey"],
            token=credentials["SessionToken"],
        )

    credentials = session.get_credentials()
    if credentials is None:
        raise Exception(
            "No AWS credentials found. Please configure AWS credentials or use --profile or --assume-role.",
        )
    return credentials


def request_options(timeout: float | None) -> dict[str, Any]:
    """Per-request keyword arguments for an opensearch-py call.

    An omitted timeout leaves the connection default in place.
    """
    if timeout is None:
        return {}
    if timeout <= 0:
        raise ValueError(f"timeout must be positive, got {timeout}")
    return {"request_timeout": timeout}
