#!/usr/bin/env python3
"""CDK application entry point for static site delivery pipelines."""

import os
import sys
from pathlib import Path

# Add the project root to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

import aws_cdk as cdk
import boto3

from infrastructure.config import Config
from infrastructure.stacks.pipeline_stack import StaticSitePipelineStack


def get_account_id() -> str:
  """Get AWS account ID from the CDK environment or current credentials."""
  account = os.environ.get("CDK_DEFAULT_ACCOUNT")
  if account:
    return account
  sts = boto3.client("sts")
  return str(sts.get_caller_identity()["Account"])


def build_app(
  app: cdk.App, config: Config, account_id: str
) -> list[StaticSitePipelineStack]:
  """Create a pipeline stack for each configured site."""
  stacks = []
  for site in config.sites:
    stacks.append(
      StaticSitePipelineStack(
        app,
        f"StaticSitePipeline-{site.name}",
        site_config=site,
        env=cdk.Environment(
          account=account_id,
          region=site.region,
        ),
        description=(
          f"Delivery pipeline for {site.source.owner}/{site.source.repo} ({site.name})"
        ),
      )
    )
  return stacks


def main() -> None:
  """Create CDK app with stacks for each configured site."""
  app = cdk.App()

  config_path = app.node.try_get_context("config") or "pipeline.yaml"
  config = Config.from_yaml(Path(config_path))

  build_app(app, config, get_account_id())

  app.synth()


if __name__ == "__main__":
  main()
