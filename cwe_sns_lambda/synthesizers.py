"""
Resource synthesizers for a single cweSns event

Each synthesizer takes the shared template and a normalized EventConfig and
mutates the template in place. They run in the order of SYNTHESIS_PIPELINE:
the topic must exist before the policies, rule target, subscription and
permission can reference it.
"""

from typing import Any, Callable, Dict, Tuple

from .config import DEFAULT_TOPIC_POLICY_RESOURCE_NAME, EventConfig
from .exceptions import CapacityError, StructuralError
from .naming import (
    lambda_logical_id,
    permission_logical_id,
    qualified_name,
    subscription_logical_id,
)
from .resources import (
    Permission,
    PolicyDocument,
    Queue,
    QueuePolicy,
    Subscription,
    Topic,
    TopicPolicy,
    dlq_send_statement,
    ref,
    rule_target,
    topic_publish_statement,
)
from .template import Template

# EventBridge hard limit on targets per rule
MAX_RULE_TARGETS = 5

Synthesizer = Callable[[Template, EventConfig], None]


def _policy_properties(policy: Dict[str, Any]) -> Tuple[Dict[str, Any], list]:
    properties = policy.setdefault("Properties", {})
    document = properties.setdefault("PolicyDocument", {})
    return properties, document.setdefault("Statement", [])


def add_sns_topic(template: Template, config: EventConfig) -> None:
    template.put(
        config.topic_resource_name,
        Topic(topic_name=qualified_name(config.prefix, config.topic_resource_name)),
    )


def add_sns_dlq(template: Template, config: EventConfig) -> None:
    """Create the DLQ unless an earlier event already claimed its logical ID"""
    template.setdefault(
        config.dlq_resource_name,
        Queue(queue_name=qualified_name(config.prefix, config.dlq_resource_name)),
    )


def add_cwe_to_sns_policy(template: Template, config: EventConfig) -> None:
    """Let EventBridge publish to this event's topic via the shared topic policy"""
    policy = template.setdefault(
        config.topic_policy_resource_name,
        TopicPolicy(
            policy_document=PolicyDocument(
                # Id always uses the default name, even for custom policy resources
                document_id=qualified_name(
                    config.prefix, DEFAULT_TOPIC_POLICY_RESOURCE_NAME
                )
            )
        ),
    )
    properties, statements = _policy_properties(policy)
    properties.setdefault("Topics", []).append(ref(config.topic_resource_name))
    statements.append(topic_publish_statement(config.topic_resource_name))


def add_sns_to_dlq_policy(template: Template, config: EventConfig) -> None:
    """Let this event's topic redrive into the shared DLQ"""
    policy = template.setdefault(
        config.dlq_policy_resource_name,
        QueuePolicy(
            policy_document=PolicyDocument(
                document_id=qualified_name(
                    config.prefix, config.dlq_policy_resource_name
                )
            )
        ),
    )
    properties, statements = _policy_properties(policy)
    properties.setdefault("Queues", []).append(ref(config.dlq_resource_name))
    statements.append(
        dlq_send_statement(config.dlq_resource_name, config.topic_resource_name)
    )


def add_topic_to_cwe_rule(template: Template, config: EventConfig) -> None:
    """
    Append this event's topic to the targets of an existing rule.

    Raises:
        StructuralError: the rule is missing or has no Properties.Targets list
        CapacityError: the rule already has MAX_RULE_TARGETS targets
    """
    rule = template.get(config.rule_resource_name)
    properties = rule.get("Properties") if isinstance(rule, dict) else None
    targets = properties.get("Targets") if isinstance(properties, dict) else None
    if not isinstance(targets, list):
        raise StructuralError(config.rule_resource_name)

    if len(targets) >= MAX_RULE_TARGETS:
        raise CapacityError(config.rule_resource_name, MAX_RULE_TARGETS)

    targets.append(rule_target(config.topic_resource_name, config.rule_message))


def add_topic_subscription(template: Template, config: EventConfig) -> None:
    template.put(
        subscription_logical_id(config.topic_resource_name),
        Subscription(
            topic_logical_id=config.topic_resource_name,
            function_logical_id=lambda_logical_id(config.func_name),
            dlq_logical_id=config.dlq_resource_name,
            filter_policy=config.filter_policy,
        ),
    )


def add_event_invocation_permission(template: Template, config: EventConfig) -> None:
    template.put(
        permission_logical_id(config.func_name, config.topic_resource_name),
        Permission(
            function_logical_id=lambda_logical_id(config.func_name),
            topic_logical_id=config.topic_resource_name,
        ),
    )


SYNTHESIS_PIPELINE: Tuple[Synthesizer, ...] = (
    add_sns_topic,
    add_sns_dlq,
    add_cwe_to_sns_policy,
    add_sns_to_dlq_policy,
    add_topic_to_cwe_rule,
    add_topic_subscription,
    add_event_invocation_permission,
)


def synthesize(template: Template, config: EventConfig) -> None:
    """
    Run every synthesizer for one event, stopping at the first failure.

    Resources written by earlier steps are left in place when a later step
    raises.
    """
    for synthesizer in SYNTHESIS_PIPELINE:
        synthesizer(template, config)
