"""Cognito user pool reserved for site authentication."""

from aws_cdk import aws_cognito as cognito
from constructs import Construct


class IdentityPool(Construct):
  """Cognito user pool with a Cognito-hosted sign-in domain."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    domain_prefix: str,
  ) -> None:
    super().__init__(scope, id)

    self.user_pool = cognito.UserPool(self, "UserPool")

    # Prefix must be unique across the region
    self.domain = self.user_pool.add_domain(
      "default",
      cognito_domain=cognito.CognitoDomainOptions(domain_prefix=domain_prefix),
    )
