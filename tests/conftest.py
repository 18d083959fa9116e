"""
Shared fixtures for cweSns synthesis tests
"""

import copy
from typing import Any, Dict

import pytest

from cwe_sns_lambda import Template

BASE_TEMPLATE: Dict[str, Any] = {
    "AWSTemplateFormatVersion": "2010-09-09",
    "Resources": {
        "ProcessEventLambdaFunction": {
            "Type": "AWS::Lambda::Function",
            "Properties": {"Handler": "handler.handler", "Runtime": "python3.12"},
        },
        "OrderPlacedRule": {
            "Type": "AWS::Events::Rule",
            "Properties": {
                "EventPattern": {"source": ["orders"]},
                "Targets": [],
            },
        },
    },
}


@pytest.fixture
def template_body() -> Dict[str, Any]:
    """Fresh base template with one rule and one function"""
    return copy.deepcopy(BASE_TEMPLATE)


@pytest.fixture
def template(template_body) -> Template:
    return Template(template_body)


@pytest.fixture
def fill_rule(template_body):
    """Give OrderPlacedRule a number of placeholder targets"""

    def _fill(count: int):
        targets = [
            {"Arn": {"Ref": f"Existing{i}"}, "Id": f"Existing{i}"} for i in range(count)
        ]
        template_body["Resources"]["OrderPlacedRule"]["Properties"]["Targets"] = targets
        return targets

    return _fill
