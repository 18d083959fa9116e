"""
Validation and defaulting of cweSns event declarations
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping

from .exceptions import ConfigurationError
from .naming import default_prefix, derived_topic_name, to_pascal_case

DEFAULT_TOPIC_POLICY_RESOURCE_NAME = "CWEtoSNSInsertPolicy"
DEFAULT_DLQ_RESOURCE_NAME = "SNSDeadLetterQueue"
DEFAULT_DLQ_POLICY_RESOURCE_NAME = "SNStoDLQInsertPolicy"

MAPPING_FIELDS = ("ruleMessage", "filterPolicy")

USAGE = """
    functions:
      processEvent:
        handler: handler.handler
        events:
          - cweSns:
              ruleResourceName: string                              #required
              topicResourceName: string                             #optional
              dlqResourceName:  string                              #optional
              dlqPolicyResourceName : string                        #optional
              topicPolicyResourceName : string                      #optional
              ruleMessage: Input || InputPath || InputTransformer   #optional
              filterPolicy: Object                                  #optional
              prefix: string                                        #optional
"""


@dataclass(frozen=True)
class EventConfig:
    """
    Fully defaulted configuration for one cweSns event.

    Every optional field of the raw declaration falls back to a default when
    it is absent or empty:

    - prefix: ``<service>-<stage>-``
    - topic_resource_name: ``<ruleResourceName>To<FuncName>Topic``
    - topic_policy_resource_name: ``CWEtoSNSInsertPolicy``
    - dlq_resource_name: ``SNSDeadLetterQueue``
    - dlq_policy_resource_name: ``SNStoDLQInsertPolicy``
    - rule_message / filter_policy: empty mapping
    """

    rule_resource_name: str
    func_name: str
    prefix: str
    topic_resource_name: str
    topic_policy_resource_name: str = DEFAULT_TOPIC_POLICY_RESOURCE_NAME
    dlq_resource_name: str = DEFAULT_DLQ_RESOURCE_NAME
    dlq_policy_resource_name: str = DEFAULT_DLQ_POLICY_RESOURCE_NAME
    rule_message: Dict[str, Any] = field(default_factory=dict)
    filter_policy: Dict[str, Any] = field(default_factory=dict)

    # Unhashable: rule_message and filter_policy are dicts
    __hash__ = None  # type: ignore[assignment]


def normalize_config(
    function_name: str, stage: str, service_name: str, raw_config: Mapping[str, Any]
) -> EventConfig:
    """
    Validate a raw cweSns declaration and apply defaults.

    Only ``ruleResourceName`` is required; the topic name always has a
    derived default. ``ruleMessage`` and ``filterPolicy`` must be mappings
    when given.
    """
    if not isinstance(raw_config, Mapping) or not raw_config.get("ruleResourceName"):
        raise ConfigurationError(function_name, USAGE)

    for key in MAPPING_FIELDS:
        value = raw_config.get(key)
        if value and not isinstance(value, Mapping):
            raise ConfigurationError(function_name, USAGE)

    rule_resource_name = raw_config["ruleResourceName"]
    func_name = to_pascal_case(function_name)

    return EventConfig(
        rule_resource_name=rule_resource_name,
        func_name=func_name,
        prefix=raw_config.get("prefix") or default_prefix(service_name, stage),
        topic_resource_name=(
            raw_config.get("topicResourceName")
            or derived_topic_name(rule_resource_name, func_name)
        ),
        topic_policy_resource_name=(
            raw_config.get("topicPolicyResourceName")
            or DEFAULT_TOPIC_POLICY_RESOURCE_NAME
        ),
        dlq_resource_name=(
            raw_config.get("dlqResourceName") or DEFAULT_DLQ_RESOURCE_NAME
        ),
        dlq_policy_resource_name=(
            raw_config.get("dlqPolicyResourceName") or DEFAULT_DLQ_POLICY_RESOURCE_NAME
        ),
        rule_message=dict(raw_config.get("ruleMessage") or {}),
        filter_policy=dict(raw_config.get("filterPolicy") or {}),
    )
