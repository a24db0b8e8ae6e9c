"""CodePipeline wiring GitHub source, CodeBuild and S3 deploy."""

from aws_cdk import SecretValue
from aws_cdk import aws_codebuild as codebuild
from aws_cdk import aws_codepipeline as codepipeline
from aws_cdk import aws_codepipeline_actions as actions
from aws_cdk import aws_s3 as s3
from constructs import Construct

from ..config import SourceConfig


class DeliveryPipeline(Construct):
  """Three-stage delivery pipeline: Source -> Build -> Deploy.

  Artifacts:
  - source output: repository checkout from GitHub
  - build output: contents of the buildspec base directory
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    pipeline_name: str,
    source: SourceConfig,
    build_project: codebuild.IProject,
    bucket: s3.IBucket,
  ) -> None:
    super().__init__(scope, id)

    self.source_output = codepipeline.Artifact()
    self.build_output = codepipeline.Artifact()

    source_action = actions.GitHubSourceAction(
      action_name="GithubSource",
      owner=source.owner,
      repo=source.repo,
      branch=source.branch,
      oauth_token=SecretValue.secrets_manager(source.oauth_token_secret),
      output=self.source_output,
    )

    build_action = actions.CodeBuildAction(
      action_name="Build",
      project=build_project,
      input=self.source_output,
      outputs=[self.build_output],
    )

    deploy_action = actions.S3DeployAction(
      action_name="S3Deploy",
      input=self.build_output,
      bucket=bucket,
    )

    self.pipeline = codepipeline.Pipeline(
      self,
      "Pipeline",
      pipeline_name=pipeline_name,
      cross_account_keys=False,
    )

    self.stage_names: list[str] = []
    for stage_name, action in (
      ("Source", source_action),
      ("Build", build_action),
      ("Deploy", deploy_action),
    ):
      self.pipeline.add_stage(stage_name=stage_name, actions=[action])
      self.stage_names.append(stage_name)
