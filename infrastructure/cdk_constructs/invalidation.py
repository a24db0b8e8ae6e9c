"""CloudFront cache invalidation after a successful pipeline run."""

from aws_cdk import Duration
from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_codepipeline as codepipeline
from aws_cdk import aws_events as events
from aws_cdk import aws_events_targets as targets
from aws_cdk import aws_iam as iam
from aws_cdk import aws_lambda as lambda_
from constructs import Construct


class InvalidationHandler(Construct):
  """Lambda triggered by EventBridge when a pipeline execution succeeds.

  The S3 deploy action replaces the whole site, so the handler invalidates
  every path rather than individual keys.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    pipeline: codepipeline.IPipeline,
    distribution: cloudfront.IDistribution,
  ) -> None:
    super().__init__(scope, id)

    self.handler = lambda_.Function(
      self,
      "Handler",
      runtime=lambda_.Runtime.PYTHON_3_12,
      handler="index.handler",
      code=lambda_.Code.from_inline(self._get_invalidation_code()),
      environment={
        "DISTRIBUTION_ID": distribution.distribution_id,
      },
      timeout=Duration.seconds(30),
    )

    self.handler.add_to_role_policy(
      iam.PolicyStatement(
        actions=["cloudfront:CreateInvalidation"],
        resources=[
          f"arn:aws:cloudfront::*:distribution/{distribution.distribution_id}"
        ],
      )
    )

    events.Rule(
      self,
      "PipelineSucceededRule",
      event_pattern=events.EventPattern(
        source=["aws.codepipeline"],
        detail_type=["CodePipeline Pipeline Execution State Change"],
        detail={
          "pipeline": [pipeline.pipeline_name],
          "state": ["SUCCEEDED"],
        },
      ),
      targets=[targets.LambdaFunction(self.handler)],
    )

  def _get_invalidation_code(self) -> str:
    return """
import boto3
import os

def handler(event, context):
    cloudfront = boto3.client("cloudfront")
    distribution_id = os.environ["DISTRIBUTION_ID"]
    # Direct invocations carry no execution id; CallerReference must stay unique
    execution_id = event.get("detail", {}).get("execution-id") or context.aws_request_id

    response = cloudfront.create_invalidation(
        DistributionId=distribution_id,
        InvalidationBatch={
            "Paths": {
                "Quantity": 1,
                "Items": ["/*"]
            },
            "CallerReference": execution_id
        }
    )

    print(f"Created invalidation {response['Invalidation']['Id']} for {execution_id}")
    return {"statusCode": 200}
"""
