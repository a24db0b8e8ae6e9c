#!/usr/bin/env python3
"""Show the state of a delivery pipeline and optionally start a release."""

import argparse
import sys
from typing import Any

import boto3


def get_stage_states(
  pipeline_name: str, region: str = "us-east-1"
) -> list[dict[str, Any]]:
  """Return name, status and execution id of each stage's latest execution."""
  codepipeline = boto3.client("codepipeline", region_name=region)
  response = codepipeline.get_pipeline_state(name=pipeline_name)

  stages = []
  for stage in response.get("stageStates", []):
    latest = stage.get("latestExecution", {})
    stages.append(
      {
        "name": stage["stageName"],
        "status": latest.get("status", "NotRun"),
        "execution_id": latest.get("pipelineExecutionId"),
      }
    )
  return stages


def start_release(pipeline_name: str, region: str = "us-east-1") -> str:
  """Start a new pipeline execution and return its id."""
  codepipeline = boto3.client("codepipeline", region_name=region)
  response = codepipeline.start_pipeline_execution(name=pipeline_name)
  return str(response["pipelineExecutionId"])


def main() -> None:
  """Main entry point."""
  parser = argparse.ArgumentParser(
    description="Show delivery pipeline stage states"
  )
  parser.add_argument(
    "pipeline_name",
    help="CodePipeline name (e.g., AwsIDFExample)",
  )
  parser.add_argument(
    "--region",
    default="us-east-1",
    help="AWS region (default: us-east-1)",
  )
  parser.add_argument(
    "--release",
    action="store_true",
    help="Start a new execution before reporting",
  )
  args = parser.parse_args()

  try:
    if args.release:
      execution_id = start_release(args.pipeline_name, args.region)
      print(f"Started execution {execution_id}")
    stages = get_stage_states(args.pipeline_name, args.region)
  except Exception as e:
    print(f"Error: {e}", file=sys.stderr)
    sys.exit(1)

  for stage in stages:
    execution = stage["execution_id"] or "-"
    print(f"{stage['name']:<10} {stage['status']:<12} {execution}")


if __name__ == "__main__":
  main()
