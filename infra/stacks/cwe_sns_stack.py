"""
Stack embedding a CloudFormation template extended with cweSns resources
"""

import json
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from aws_cdk import Stack, cloudformation_include as cfn_inc
from constructs import Construct

from cwe_sns_lambda import modify_template


class CweSnsStack(Stack):
    """
    Loads a base template, adds the resources for every cweSns event of a
    service definition and includes the result in this stack
    """

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        base_template_file: str,
        service_definition: Mapping[str, Any],
        stage: Optional[str] = None,
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # Get context values; CLI context values arrive as strings
        self.verbose = str(self.node.try_get_context("verbose") or "").lower() in (
            "1",
            "true",
            "yes",
        )
        stage = stage or self.node.try_get_context("stage")

        base_path = Path(base_template_file)
        template_body: Dict[str, Any] = json.loads(base_path.read_text())

        self.mutated_template = modify_template(
            service_definition, template_body, stage=stage, verbose=self.verbose
        )

        # CfnInclude only reads from disk
        self.template_file = base_path.with_name(f"{base_path.stem}.cwe-sns.json")
        self.template_file.write_text(json.dumps(self.mutated_template, indent=2))

        self.included = cfn_inc.CfnInclude(
            self, "Template", template_file=str(self.template_file)
        )
