"""CloudFront distribution in front of the website bucket."""

from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_cloudfront_origins as origins
from aws_cdk import aws_s3 as s3
from constructs import Construct


class SiteDistribution(Construct):
  """CloudFront distribution reading the bucket through an origin access identity.

  Forbidden responses from S3 (missing keys) are answered with the error page
  and a 200 status so client-side routes still resolve.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket: s3.IBucket,
    error_page: str = "/error.html",
    comment: str | None = None,
  ) -> None:
    super().__init__(scope, id)

    self.origin_access_identity = cloudfront.OriginAccessIdentity(
      self,
      "OriginAccessIdentity",
      comment=comment or f"{bucket.node.id} OAI",
    )

    self.distribution = cloudfront.Distribution(
      self,
      "Distribution",
      default_behavior=cloudfront.BehaviorOptions(
        origin=origins.S3BucketOrigin.with_origin_access_identity(
          bucket,
          origin_access_identity=self.origin_access_identity,
        ),
        viewer_protocol_policy=cloudfront.ViewerProtocolPolicy.ALLOW_ALL,
        allowed_methods=cloudfront.AllowedMethods.ALLOW_GET_HEAD_OPTIONS,
      ),
      error_responses=[
        cloudfront.ErrorResponse(
          http_status=403,
          response_page_path=error_page,
          response_http_status=200,
        )
      ],
    )
