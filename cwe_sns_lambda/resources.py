"""
Typed CloudFormation resource records produced by the cweSns synthesizers
"""

import copy
from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, List

POLICY_VERSION = "2012-10-17"

# 14 days in seconds
DLQ_MESSAGE_RETENTION_PERIOD = 1209600

EVENTS_SERVICE_PRINCIPAL = "events.amazonaws.com"
SNS_SERVICE_PRINCIPAL = "sns.amazonaws.com"


def ref(logical_id: str) -> Dict[str, str]:
    """Reference placeholder resolved at deploy time"""
    return {"Ref": logical_id}


def get_att(logical_id: str, attribute: str) -> Dict[str, List[str]]:
    """Attribute lookup placeholder resolved at deploy time"""
    return {"Fn::GetAtt": [logical_id, attribute]}


class Resource:
    """
    Base record: a resource kind discriminator plus a properties bag
    """

    resource_type: ClassVar[str] = ""

    def properties(self) -> Dict[str, Any]:
        raise NotImplementedError

    def to_cfn(self) -> Dict[str, Any]:
        """Render as a CloudFormation resource definition"""
        return {"Type": self.resource_type, "Properties": self.properties()}


@dataclass
class Topic(Resource):
    resource_type: ClassVar[str] = "AWS::SNS::Topic"

    topic_name: str

    def properties(self) -> Dict[str, Any]:
        return {"TopicName": self.topic_name}


@dataclass
class Queue(Resource):
    resource_type: ClassVar[str] = "AWS::SQS::Queue"

    queue_name: str
    message_retention_period: int = DLQ_MESSAGE_RETENTION_PERIOD

    def properties(self) -> Dict[str, Any]:
        return {
            "QueueName": self.queue_name,
            "MessageRetentionPeriod": self.message_retention_period,
        }


@dataclass
class PolicyDocument:
    """IAM policy document with an initially empty statement list"""

    document_id: str
    statements: List[Dict[str, Any]] = field(default_factory=list)

    def to_cfn(self) -> Dict[str, Any]:
        return {
            "Version": POLICY_VERSION,
            "Id": self.document_id,
            "Statement": copy.deepcopy(self.statements),
        }


@dataclass
class TopicPolicy(Resource):
    resource_type: ClassVar[str] = "AWS::SNS::TopicPolicy"

    policy_document: PolicyDocument
    topics: List[Dict[str, Any]] = field(default_factory=list)

    def properties(self) -> Dict[str, Any]:
        return {
            "PolicyDocument": self.policy_document.to_cfn(),
            "Topics": copy.deepcopy(self.topics),
        }


@dataclass
class QueuePolicy(Resource):
    resource_type: ClassVar[str] = "AWS::SQS::QueuePolicy"

    policy_document: PolicyDocument
    queues: List[Dict[str, Any]] = field(default_factory=list)

    def properties(self) -> Dict[str, Any]:
        return {
            "PolicyDocument": self.policy_document.to_cfn(),
            "Queues": copy.deepcopy(self.queues),
        }


@dataclass
class Subscription(Resource):
    resource_type: ClassVar[str] = "AWS::SNS::Subscription"

    topic_logical_id: str
    function_logical_id: str
    dlq_logical_id: str
    filter_policy: Dict[str, Any] = field(default_factory=dict)
    protocol: str = "lambda"

    def properties(self) -> Dict[str, Any]:
        return {
            "TopicArn": ref(self.topic_logical_id),
            "Endpoint": get_att(self.function_logical_id, "Arn"),
            "Protocol": self.protocol,
            "RedrivePolicy": {
                "deadLetterTargetArn": get_att(self.dlq_logical_id, "Arn")
            },
            "FilterPolicy": copy.deepcopy(self.filter_policy),
        }


@dataclass
class Permission(Resource):
    resource_type: ClassVar[str] = "AWS::Lambda::Permission"

    function_logical_id: str
    topic_logical_id: str
    action: str = "lambda:InvokeFunction"
    principal: str = SNS_SERVICE_PRINCIPAL

    def properties(self) -> Dict[str, Any]:
        return {
            "FunctionName": get_att(self.function_logical_id, "Arn"),
            "Action": self.action,
            "Principal": self.principal,
            "SourceArn": ref(self.topic_logical_id),
        }


def topic_publish_statement(topic_logical_id: str) -> Dict[str, Any]:
    """Allow EventBridge to publish to a topic"""
    return {
        "Effect": "Allow",
        "Principal": {"Service": [EVENTS_SERVICE_PRINCIPAL]},
        "Action": ["sns:Publish"],
        "Resource": ref(topic_logical_id),
    }


def dlq_send_statement(dlq_logical_id: str, topic_logical_id: str) -> Dict[str, Any]:
    """Allow SNS to send messages to a DLQ, scoped to a single source topic"""
    return {
        "Effect": "Allow",
        "Principal": {"Service": SNS_SERVICE_PRINCIPAL},
        "Action": "sqs:SendMessage",
        "Resource": get_att(dlq_logical_id, "Arn"),
        "Condition": {"ArnEquals": {"aws:SourceArn": ref(topic_logical_id)}},
    }


def rule_target(topic_logical_id: str, rule_message: Dict[str, Any]) -> Dict[str, Any]:
    """Rule target entry pointing at a topic, with rule_message fields merged in"""
    return {
        "Arn": ref(topic_logical_id),
        "Id": topic_logical_id,
        **copy.deepcopy(rule_message),
    }
