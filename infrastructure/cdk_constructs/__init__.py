"""CDK constructs for static site delivery pipelines."""

from .build_project import SiteBuildProject, build_spec_document
from .distribution import SiteDistribution
from .identity import IdentityPool
from .invalidation import InvalidationHandler
from .pipeline import DeliveryPipeline
from .storage import WebsiteBucket

__all__ = [
  "DeliveryPipeline",
  "IdentityPool",
  "InvalidationHandler",
  "SiteBuildProject",
  "SiteDistribution",
  "WebsiteBucket",
  "build_spec_document",
]
