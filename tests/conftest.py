"""Pytest fixtures for CDK construct tests."""

import aws_cdk as cdk
import pytest

from infrastructure.config import SiteConfig, SourceConfig


@pytest.fixture
def app() -> cdk.App:
  """Create a CDK App for testing."""
  return cdk.App()


@pytest.fixture
def stack(app: cdk.App) -> cdk.Stack:
  """Create a CDK Stack for testing."""
  return cdk.Stack(app, "TestStack", env=cdk.Environment(region="us-east-1"))


@pytest.fixture
def site_config() -> SiteConfig:
  """Site configuration matching the example pipeline."""
  return SiteConfig(
    name="aws-idf-example",
    source=SourceConfig(owner="mactunechy", repo="aws-idf-example"),
    pipeline_name="AwsIDFExample",
  )
