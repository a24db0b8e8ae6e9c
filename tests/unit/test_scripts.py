"""Tests for the operator scripts."""

import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import ClientError

# Add scripts to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "scripts"))


def _client_error(code: str, operation: str) -> ClientError:
  return ClientError({"Error": {"Code": code, "Message": code}}, operation)


class TestStoreToken:
  """Tests for store_github_token.store_token."""

  def test_creates_secret(self) -> None:
    """A new secret is created with the stripped token."""
    from store_github_token import store_token

    with patch("store_github_token.boto3") as mock_boto3:
      secrets = MagicMock()
      mock_boto3.client.return_value = secrets

      assert store_token(" ghp_abc \n") == "created"

    mock_boto3.client.assert_called_once_with(
      "secretsmanager", region_name="us-east-1"
    )
    secrets.create_secret.assert_called_once()
    assert secrets.create_secret.call_args.kwargs["Name"] == "github_token"
    assert secrets.create_secret.call_args.kwargs["SecretString"] == "ghp_abc"
    secrets.put_secret_value.assert_not_called()

  def test_updates_existing_secret(self) -> None:
    """An existing secret gets a new value."""
    from store_github_token import store_token

    with patch("store_github_token.boto3") as mock_boto3:
      secrets = MagicMock()
      secrets.create_secret.side_effect = _client_error(
        "ResourceExistsException", "CreateSecret"
      )
      mock_boto3.client.return_value = secrets

      assert store_token("ghp_abc", secret_name="docs/github") == "updated"

    secrets.put_secret_value.assert_called_once_with(
      SecretId="docs/github", SecretString="ghp_abc"
    )

  def test_other_errors_propagate(self) -> None:
    """Errors other than an existing secret are raised."""
    from store_github_token import store_token

    with patch("store_github_token.boto3") as mock_boto3:
      secrets = MagicMock()
      secrets.create_secret.side_effect = _client_error(
        "AccessDeniedException", "CreateSecret"
      )
      mock_boto3.client.return_value = secrets

      with pytest.raises(ClientError):
        store_token("ghp_abc")

    secrets.put_secret_value.assert_not_called()

  def test_empty_token_rejected(self) -> None:
    """Whitespace-only tokens are rejected before calling AWS."""
    from store_github_token import store_token

    with patch("store_github_token.boto3") as mock_boto3:
      with pytest.raises(ValueError):
        store_token("   ")
      mock_boto3.client.assert_not_called()

  def test_main_reports_errors(self, capsys: pytest.CaptureFixture[str]) -> None:
    """Failures print to stderr and exit 1."""
    import store_github_token

    with (
      patch.object(sys, "argv", ["store_github_token.py", "ghp_abc"]),
      patch("store_github_token.store_token", side_effect=RuntimeError("boom")),
      pytest.raises(SystemExit) as exc_info,
    ):
      store_github_token.main()

    assert exc_info.value.code == 1
    assert "Error: boom" in capsys.readouterr().err


class TestPipelineStatus:
  """Tests for pipeline_status helpers."""

  def test_get_stage_states(self) -> None:
    """Stage states are flattened, with NotRun for stages without runs."""
    from pipeline_status import get_stage_states

    with patch("pipeline_status.boto3") as mock_boto3:
      codepipeline = MagicMock()
      codepipeline.get_pipeline_state.return_value = {
        "stageStates": [
          {
            "stageName": "Source",
            "latestExecution": {"pipelineExecutionId": "exec-1", "status": "Succeeded"},
          },
          {
            "stageName": "Build",
            "latestExecution": {
              "pipelineExecutionId": "exec-1",
              "status": "InProgress",
            },
          },
          {"stageName": "Deploy"},
        ]
      }
      mock_boto3.client.return_value = codepipeline

      stages = get_stage_states("AwsIDFExample", region="eu-west-1")

    mock_boto3.client.assert_called_once_with("codepipeline", region_name="eu-west-1")
    codepipeline.get_pipeline_state.assert_called_once_with(name="AwsIDFExample")
    assert stages == [
      {"name": "Source", "status": "Succeeded", "execution_id": "exec-1"},
      {"name": "Build", "status": "InProgress", "execution_id": "exec-1"},
      {"name": "Deploy", "status": "NotRun", "execution_id": None},
    ]

  def test_start_release(self) -> None:
    """Starting a release returns the execution id."""
    from pipeline_status import start_release

    with patch("pipeline_status.boto3") as mock_boto3:
      codepipeline = MagicMock()
      codepipeline.start_pipeline_execution.return_value = {
        "pipelineExecutionId": "exec-2"
      }
      mock_boto3.client.return_value = codepipeline

      assert start_release("AwsIDFExample") == "exec-2"

    codepipeline.start_pipeline_execution.assert_called_once_with(
      name="AwsIDFExample"
    )

  def test_main_release_then_report(self, capsys: pytest.CaptureFixture[str]) -> None:
    """--release starts an execution before printing stage states."""
    import pipeline_status

    with (
      patch.object(sys, "argv", ["pipeline_status.py", "AwsIDFExample", "--release"]),
      patch("pipeline_status.start_release", return_value="exec-3") as mock_start,
      patch(
        "pipeline_status.get_stage_states",
        return_value=[
          {"name": "Source", "status": "InProgress", "execution_id": "exec-3"}
        ],
      ),
    ):
      pipeline_status.main()

    mock_start.assert_called_once_with("AwsIDFExample", "us-east-1")
    out = capsys.readouterr().out
    assert "Started execution exec-3" in out
    assert "Source" in out and "InProgress" in out
