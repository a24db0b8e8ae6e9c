"""CodeBuild project that builds the static site."""

from typing import Any

from aws_cdk import aws_codebuild as codebuild
from constructs import Construct

from ..config import BuildConfig


def build_spec_document(build: BuildConfig) -> dict[str, Any]:
  """Return the buildspec (version 0.2) for a site build.

  Shell state carries across phases, so the ``cd`` issued during install
  still applies when the build commands run.
  """
  install_commands = list(build.install_commands)
  base_directory = build.output_directory
  if build.app_directory:
    install_commands.insert(0, f"cd {build.app_directory}")
    base_directory = f"{build.app_directory}/{build.output_directory}"

  return {
    "version": "0.2",
    "phases": {
      "install": {
        "runtime-versions": {"nodejs": build.node_version},
        "commands": install_commands,
      },
      "build": {
        "commands": list(build.build_commands),
      },
    },
    "artifacts": {
      "files": ["**/*"],
      "base-directory": base_directory,
    },
  }


class SiteBuildProject(Construct):
  """CodeBuild pipeline project driven by an inline buildspec."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    build: BuildConfig,
  ) -> None:
    super().__init__(scope, id)

    self.project = codebuild.PipelineProject(
      self,
      "Project",
      build_spec=codebuild.BuildSpec.from_object(build_spec_document(build)),
      environment=codebuild.BuildEnvironment(
        build_image=build.linux_build_image(),
      ),
    )
