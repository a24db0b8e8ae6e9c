#!/usr/bin/env python3
"""Store the GitHub OAuth token used by the pipeline source stage."""

import argparse
import sys

import boto3
from botocore.exceptions import ClientError


def store_token(
  token: str, secret_name: str = "github_token", region: str = "us-east-1"
) -> str:
  """Create or update the Secrets Manager secret holding the token.

  Args:
    token: GitHub personal access token with repo and admin:repo_hook scopes
    secret_name: Secret name referenced by the pipeline (default: github_token)
    region: AWS region (default: us-east-1)

  Returns:
    "created" for a new secret, "updated" if it already existed
  """
  token = token.strip()
  if not token:
    raise ValueError("Token must not be empty")

  secrets = boto3.client("secretsmanager", region_name=region)

  try:
    secrets.create_secret(
      Name=secret_name,
      SecretString=token,
      Description="GitHub OAuth token for static site pipelines",
    )
    return "created"
  except ClientError as e:
    if e.response["Error"]["Code"] != "ResourceExistsException":
      raise

  secrets.put_secret_value(SecretId=secret_name, SecretString=token)
  return "updated"


def main() -> None:
  """Store the GitHub token in Secrets Manager."""
  parser = argparse.ArgumentParser(
    description="Store the GitHub token used by the pipeline source stage"
  )
  parser.add_argument(
    "token",
    help="GitHub personal access token",
  )
  parser.add_argument(
    "--secret-name",
    default="github_token",
    help="Secrets Manager secret name (default: github_token)",
  )
  parser.add_argument(
    "--region",
    default="us-east-1",
    help="AWS region (default: us-east-1)",
  )
  args = parser.parse_args()

  try:
    result = store_token(args.token, args.secret_name, args.region)
  except Exception as e:
    print(f"Error: {e}", file=sys.stderr)
    sys.exit(1)

  print(f"✓ Secret {args.secret_name} {result}")


if __name__ == "__main__":
  main()
