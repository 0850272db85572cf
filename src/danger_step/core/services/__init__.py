from __future__ import annotations

from .validator import validate_inputs
from .url_normalizer import URLNormalizer
from .dependency_resolver import DependencyResolver
from .environment_publisher import EnvironmentPublisher, build_environment_map
from .pipeline import StepPipeline

__all__ = [
    "validate_inputs",
    "URLNormalizer",
    "DependencyResolver",
    "EnvironmentPublisher",
    "build_environment_map",
    "StepPipeline",
]
