"""
Tests for the template graph view
"""

from cwe_sns_lambda import Template
from cwe_sns_lambda.resources import Queue, Topic


def test_resources_section_created_in_place():
    body = {"AWSTemplateFormatVersion": "2010-09-09"}
    template = Template(body)

    template.put("MyTopic", Topic(topic_name="svc-dev-MyTopic"))

    assert body["Resources"] is template.resources
    assert body["Resources"]["MyTopic"] == {
        "Type": "AWS::SNS::Topic",
        "Properties": {"TopicName": "svc-dev-MyTopic"},
    }


def test_setdefault_keeps_existing(template):
    """Test that setdefault returns the stored resource without overwriting it"""
    first = template.setdefault("Dlq", Queue(queue_name="first-Dlq"))
    second = template.setdefault("Dlq", Queue(queue_name="second-Dlq"))

    assert second is first
    assert template.get("Dlq")["Properties"]["QueueName"] == "first-Dlq"


def test_membership_and_size(template):
    assert "OrderPlacedRule" in template
    assert "Missing" not in template
    assert template.get("Missing") is None
    assert len(template) == 2
