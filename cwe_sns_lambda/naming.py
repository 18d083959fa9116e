"""
Naming conventions for cweSns logical IDs and physical names
"""


def to_pascal_case(identifier: str) -> str:
    """Upper-case the first character only, e.g. processEvent -> ProcessEvent"""
    return identifier[:1].upper() + identifier[1:]


def derived_topic_name(rule_resource_name: str, func_name: str) -> str:
    """Default topic logical ID for a rule/function pair"""
    return f"{rule_resource_name}To{func_name}Topic"


def qualified_name(prefix: str, base_name: str) -> str:
    return f"{prefix}{base_name}"


def default_prefix(service_name: str, stage: str) -> str:
    return f"{service_name}-{stage}-"


def lambda_logical_id(func_name: str) -> str:
    """Logical ID the host gives a compiled Lambda function"""
    return f"{func_name}LambdaFunction"


def subscription_logical_id(topic_resource_name: str) -> str:
    return f"SubscribeTo{topic_resource_name}Topic"


def permission_logical_id(func_name: str, topic_resource_name: str) -> str:
    return f"{func_name}InvokeFrom{topic_resource_name}"
