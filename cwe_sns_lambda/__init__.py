"""
Synthesizes SNS topics, DLQs and policies that fan CloudWatch Events rules out
to Lambda functions, merged into a shared CloudFormation template
"""

from .config import EventConfig, normalize_config
from .exceptions import CapacityError, ConfigurationError, CweSnsError, StructuralError
from .mutator import EventRequest, TemplateMutator, iter_event_requests, modify_template
from .synthesizers import MAX_RULE_TARGETS, SYNTHESIS_PIPELINE, synthesize
from .template import Template

__all__ = [
    "CapacityError",
    "ConfigurationError",
    "CweSnsError",
    "EventConfig",
    "EventRequest",
    "MAX_RULE_TARGETS",
    "StructuralError",
    "SYNTHESIS_PIPELINE",
    "Template",
    "TemplateMutator",
    "iter_event_requests",
    "modify_template",
    "normalize_config",
    "synthesize",
]
