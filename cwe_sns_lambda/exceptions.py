"""
Errors raised while synthesizing cweSns resources
"""


class CweSnsError(Exception):
    """Base class for every cweSns synthesis failure"""


class ConfigurationError(CweSnsError):
    """
    A cweSns event declaration is missing a required field
    """

    def __init__(self, function_name: str, usage: str) -> None:
        self.function_name = function_name
        super().__init__(
            "When creating a cweSns handler, you must define the rule name.\n"
            f"In function [{function_name}]\n\n"
            f"Usage\n-----\n{usage}"
        )


class StructuralError(CweSnsError):
    """
    The referenced rule resource is missing or has no Properties.Targets list
    """

    def __init__(self, rule_resource_name: str) -> None:
        self.rule_resource_name = rule_resource_name
        super().__init__(
            f"Invalid resource {rule_resource_name} for a cwe rule. "
            "The resource must be defined and contain Properties and Targets"
        )


class CapacityError(CweSnsError):
    """
    The referenced rule already carries the maximum number of targets
    """

    def __init__(self, rule_resource_name: str, limit: int) -> None:
        self.rule_resource_name = rule_resource_name
        self.limit = limit
        super().__init__(
            f"Maximum of {limit} targets reached for {rule_resource_name} rule"
        )
