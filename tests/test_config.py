"""
Tests for cweSns config normalization
"""

import pytest

from cwe_sns_lambda import ConfigurationError, EventConfig, normalize_config


def test_defaults_applied():
    """Test that every optional field falls back to its default"""
    config = normalize_config(
        "processEvent", "dev", "orders", {"ruleResourceName": "OrderPlacedRule"}
    )

    assert config == EventConfig(
        rule_resource_name="OrderPlacedRule",
        func_name="ProcessEvent",
        prefix="orders-dev-",
        topic_resource_name="OrderPlacedRuleToProcessEventTopic",
        topic_policy_resource_name="CWEtoSNSInsertPolicy",
        dlq_resource_name="SNSDeadLetterQueue",
        dlq_policy_resource_name="SNStoDLQInsertPolicy",
        rule_message={},
        filter_policy={},
    )


def test_explicit_values_kept():
    """Test that explicit values override the defaults"""
    raw = {
        "ruleResourceName": "Rule",
        "topicResourceName": "CustomTopic",
        "dlqResourceName": "CustomDlq",
        "dlqPolicyResourceName": "CustomDlqPolicy",
        "topicPolicyResourceName": "CustomTopicPolicy",
        "ruleMessage": {"Input": "{}"},
        "filterPolicy": {"kind": ["a"]},
        "prefix": "custom-",
    }
    config = normalize_config("handler", "prod", "svc", raw)

    assert config.func_name == "Handler"
    assert config.prefix == "custom-"
    assert config.topic_resource_name == "CustomTopic"
    assert config.dlq_resource_name == "CustomDlq"
    assert config.dlq_policy_resource_name == "CustomDlqPolicy"
    assert config.topic_policy_resource_name == "CustomTopicPolicy"
    assert config.rule_message == {"Input": "{}"}
    assert config.filter_policy == {"kind": ["a"]}


def test_empty_values_fall_back_to_defaults():
    config = normalize_config(
        "fn", "dev", "svc", {"ruleResourceName": "Rule", "prefix": "", "topicResourceName": ""}
    )

    assert config.prefix == "svc-dev-"
    assert config.topic_resource_name == "RuleToFnTopic"


def test_config_copies_mappings():
    """Test that normalized config does not alias the caller's mappings"""
    rule_message = {"InputPath": "$.detail"}
    config = normalize_config(
        "fn", "dev", "svc", {"ruleResourceName": "Rule", "ruleMessage": rule_message}
    )
    rule_message["InputPath"] = "$"

    assert config.rule_message == {"InputPath": "$.detail"}


@pytest.mark.parametrize(
    "raw",
    [
        {},
        {"ruleResourceName": ""},
        {"ruleResourceName": None},
        {"topicResourceName": "Topic"},
        None,
    ],
)
def test_missing_rule_resource_name(raw):
    """Test that a missing rule name fails with the function named"""
    with pytest.raises(ConfigurationError) as exc_info:
        normalize_config("processEvent", "dev", "orders", raw)

    assert exc_info.value.function_name == "processEvent"
    assert "[processEvent]" in str(exc_info.value)
    assert "ruleResourceName" in str(exc_info.value)


@pytest.mark.parametrize("key", ["ruleMessage", "filterPolicy"])
@pytest.mark.parametrize("value", ["Input", 42, [["Input", "x"]]])
def test_non_mapping_message_or_filter(key, value):
    """Test that malformed ruleMessage/filterPolicy fail with the function named"""
    raw = {"ruleResourceName": "Rule", key: value}

    with pytest.raises(ConfigurationError) as exc_info:
        normalize_config("processEvent", "dev", "orders", raw)

    assert exc_info.value.function_name == "processEvent"
    assert "Usage" in str(exc_info.value)


def test_event_config_is_unhashable():
    """Test that EventConfig does not advertise a hash it cannot compute"""
    config = normalize_config("fn", "dev", "svc", {"ruleResourceName": "Rule"})

    assert EventConfig.__hash__ is None
    with pytest.raises(TypeError):
        hash(config)
