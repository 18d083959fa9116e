#!/usr/bin/env python3
"""
cweSns template builder
Main CDK application entry point
"""

import sys
import os
import json
from pathlib import Path

sys.path.insert(0, os.path.dirname(__file__))
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import aws_cdk as cdk
from stacks.cwe_sns_stack import CweSnsStack

from cwe_sns_lambda.utils import setup_logger


def main():
    setup_logger("cwe_sns_lambda")

    app = cdk.App()

    # Get context values with defaults
    service_file = app.node.try_get_context("serviceFile") or "service.json"
    template_file = app.node.try_get_context("templateFile") or "template.json"
    account = app.node.try_get_context("account") or None
    region = app.node.try_get_context("region") or None

    service_definition = json.loads(Path(service_file).read_text())
    stage = (
        app.node.try_get_context("stage")
        or service_definition.get("provider", {}).get("stage")
        or "dev"
    )

    env = cdk.Environment(account=account, region=region)

    # Stack naming convention
    stack_name = f"{service_definition['service']}-{stage}"

    stack = CweSnsStack(
        app,
        stack_name,
        base_template_file=template_file,
        service_definition=service_definition,
        stage=stage,
        env=env,
        description="CloudWatch Events to SNS to Lambda fan-out with DLQ",
    )

    cdk.Tags.of(stack).add("Project", service_definition["service"])
    cdk.Tags.of(stack).add("Environment", stage)

    app.synth()


if __name__ == "__main__":
    main()
