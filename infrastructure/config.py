"""Configuration loader for static site delivery pipelines."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from aws_cdk import RemovalPolicy
from aws_cdk import aws_codebuild as codebuild

REMOVAL_POLICIES = {
  "retain": RemovalPolicy.RETAIN,
  "destroy": RemovalPolicy.DESTROY,
  "snapshot": RemovalPolicy.SNAPSHOT,
}


@dataclass
class SourceConfig:
  """GitHub repository the pipeline pulls from."""

  owner: str
  repo: str
  branch: str = "main"
  oauth_token_secret: str = "github_token"  # Secrets Manager secret name


@dataclass
class BuildConfig:
  """How CodeBuild turns the source into a static site."""

  node_version: str = "20.x"
  app_directory: str = "app"  # Subdirectory holding package.json
  install_commands: list[str] = field(
    default_factory=lambda: ["npm install pnpm -g", "pnpm install"]
  )
  build_commands: list[str] = field(default_factory=lambda: ["pnpm run build"])
  output_directory: str = "dist"  # Relative to app_directory
  build_image: str = "AMAZON_LINUX_2_5"

  def linux_build_image(self) -> codebuild.IBuildImage:
    """Resolve build_image to a CodeBuild Linux image."""
    image = None
    if self.build_image.isupper():
      image = getattr(codebuild.LinuxBuildImage, self.build_image, None)
    if image is None:
      raise ValueError(f"Unknown CodeBuild Linux image: {self.build_image}")
    return image


@dataclass
class AuthConfig:
  """Cognito user pool settings."""

  enabled: bool = True
  domain_prefix: str | None = None


@dataclass
class SiteConfig:
  """Configuration for a single site and its delivery pipeline."""

  name: str
  source: SourceConfig
  build: BuildConfig = field(default_factory=BuildConfig)
  auth: AuthConfig = field(default_factory=AuthConfig)
  pipeline_name: str | None = None
  index_document: str = "index.html"
  error_page: str = "/error.html"
  enable_invalidation: bool = False
  removal_policy: RemovalPolicy = RemovalPolicy.DESTROY
  region: str = "us-east-1"

  @property
  def resolved_pipeline_name(self) -> str:
    return self.pipeline_name or self.name

  @property
  def resolved_domain_prefix(self) -> str:
    # Cognito domain prefixes are global and lowercase only
    return (self.auth.domain_prefix or f"{self.name}-auth").lower()


@dataclass
class Config:
  """Multi-site pipeline configuration."""

  sites: list[SiteConfig] = field(default_factory=list)

  @classmethod
  def from_yaml(cls, path: Path | str = "pipeline.yaml") -> "Config":
    """Load configuration from YAML file."""
    with open(path) as f:
      data = yaml.safe_load(f) or {}

    defaults = data.get("defaults") or {}
    sites: list[SiteConfig] = []

    for site_data in data.get("sites") or []:
      merged = _merge(defaults, site_data)

      removal_policy_str = str(merged.get("removal_policy", "destroy"))
      removal_policy = REMOVAL_POLICIES.get(
        removal_policy_str.lower(), RemovalPolicy.DESTROY
      )

      source_data = merged.get("source") or {}
      source = SourceConfig(
        owner=source_data["owner"],
        repo=source_data["repo"],
        branch=source_data.get("branch", "main"),
        oauth_token_secret=source_data.get("oauth_token_secret", "github_token"),
      )

      build_data = merged.get("build") or {}
      build_defaults = BuildConfig()
      build = BuildConfig(
        node_version=str(build_data.get("node_version", build_defaults.node_version)),
        app_directory=build_data.get("app_directory", build_defaults.app_directory),
        install_commands=list(
          build_data.get("install_commands", build_defaults.install_commands)
        ),
        build_commands=list(
          build_data.get("build_commands", build_defaults.build_commands)
        ),
        output_directory=build_data.get(
          "output_directory", build_defaults.output_directory
        ),
        build_image=build_data.get("build_image", build_defaults.build_image),
      )

      auth_data = merged.get("auth") or {}
      auth = AuthConfig(
        enabled=auth_data.get("enabled", True),
        domain_prefix=auth_data.get("domain_prefix"),
      )

      sites.append(
        SiteConfig(
          name=merged["name"],
          source=source,
          build=build,
          auth=auth,
          pipeline_name=merged.get("pipeline_name"),
          index_document=merged.get("index_document", "index.html"),
          error_page=merged.get("error_page", "/error.html"),
          enable_invalidation=merged.get("enable_invalidation", False),
          removal_policy=removal_policy,
          region=merged.get("region", "us-east-1"),
        )
      )

    return cls(sites=sites)


def _merge(defaults: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
  """Merge site config over defaults, one level deep for nested sections."""
  # Keys left empty in YAML load as None and keep the default
  merged = {**defaults, **{k: v for k, v in overrides.items() if v is not None}}
  for key in ("source", "build", "auth"):
    if isinstance(defaults.get(key), dict) and isinstance(overrides.get(key), dict):
      merged[key] = {**defaults[key], **overrides[key]}
  return merged
