"""CDK stack for a site and its delivery pipeline."""

from typing import Any

import aws_cdk as cdk
from constructs import Construct

from infrastructure.cdk_constructs import (
  DeliveryPipeline,
  IdentityPool,
  InvalidationHandler,
  SiteBuildProject,
  SiteDistribution,
  WebsiteBucket,
)
from infrastructure.config import SiteConfig


class StaticSitePipelineStack(cdk.Stack):
  """Stack for one static site.

  Creates:
  - S3 bucket hosting the built site
  - CloudFront distribution with an origin access identity
  - CodeBuild project and CodePipeline (Source -> Build -> Deploy)
  - (Optional) Cognito user pool with a hosted domain
  - (Optional) CloudFront invalidation after each successful release
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    site_config: SiteConfig,
    **kwargs: Any,
  ) -> None:
    super().__init__(scope, id, **kwargs)

    self.bucket = WebsiteBucket(
      self,
      "Website",
      index_document=site_config.index_document,
      removal_policy=site_config.removal_policy,
    )

    self.distribution = SiteDistribution(
      self,
      "Cdn",
      bucket=self.bucket.bucket,
      error_page=site_config.error_page,
      comment=f"{site_config.name} bucket OAI",
    )

    self.build_project = SiteBuildProject(
      self,
      "Build",
      build=site_config.build,
    )

    self.delivery = DeliveryPipeline(
      self,
      "Delivery",
      pipeline_name=site_config.resolved_pipeline_name,
      source=site_config.source,
      build_project=self.build_project.project,
      bucket=self.bucket.bucket,
    )

    self.identity: IdentityPool | None = None
    if site_config.auth.enabled:
      self.identity = IdentityPool(
        self,
        "Identity",
        domain_prefix=site_config.resolved_domain_prefix,
      )

    self.invalidation: InvalidationHandler | None = None
    if site_config.enable_invalidation:
      self.invalidation = InvalidationHandler(
        self,
        "Invalidation",
        pipeline=self.delivery.pipeline,
        distribution=self.distribution.distribution,
      )

    # Outputs
    cdk.CfnOutput(
      self,
      "BucketName",
      value=self.bucket.bucket.bucket_name,
      description="S3 bucket receiving the build output",
    )
    cdk.CfnOutput(
      self,
      "DistributionId",
      value=self.distribution.distribution.distribution_id,
      description="CloudFront distribution ID",
    )
    cdk.CfnOutput(
      self,
      "DistributionDomainName",
      value=self.distribution.distribution.distribution_domain_name,
      description="CloudFront distribution domain name",
    )
    cdk.CfnOutput(
      self,
      "PipelineName",
      value=self.delivery.pipeline.pipeline_name,
      description="CodePipeline name",
    )
    if self.identity is not None:
      cdk.CfnOutput(
        self,
        "UserPoolId",
        value=self.identity.user_pool.user_pool_id,
        description="Cognito user pool ID",
      )
      cdk.CfnOutput(
        self,
        "UserPoolDomain",
        value=self.identity.domain.base_url(),
        description="Cognito hosted domain URL",
      )

    # Tag resources with site info
    cdk.Tags.of(self).add("Project", "static-site-pipeline")
    cdk.Tags.of(self).add("Site", site_config.name)
    cdk.Tags.of(self).add(
      "Repository", f"{site_config.source.owner}/{site_config.source.repo}"
    )
