"""CDK stacks for static site delivery pipelines."""

from .pipeline_stack import StaticSitePipelineStack

__all__ = ["StaticSitePipelineStack"]
