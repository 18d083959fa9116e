"""
Explicit graph view over a caller-owned CloudFormation template
"""

from typing import Any, Dict, MutableMapping, Optional

from .resources import Resource


class Template:
    """
    Resources of a CloudFormation template keyed by logical ID.

    Wraps the caller's template dict by reference: every change lands in
    ``body["Resources"]`` and the dict itself is never replaced.
    """

    def __init__(self, body: MutableMapping[str, Any]) -> None:
        self.body = body
        self.resources: Dict[str, Dict[str, Any]] = body.setdefault("Resources", {})

    def __contains__(self, logical_id: str) -> bool:
        return logical_id in self.resources

    def __len__(self) -> int:
        return len(self.resources)

    def get(self, logical_id: str) -> Optional[Dict[str, Any]]:
        return self.resources.get(logical_id)

    def put(self, logical_id: str, resource: Resource) -> Dict[str, Any]:
        """Create or overwrite a resource, returning its stored definition"""
        definition = resource.to_cfn()
        self.resources[logical_id] = definition
        return definition

    def setdefault(self, logical_id: str, resource: Resource) -> Dict[str, Any]:
        """Store a resource only if the logical ID is free; return what is stored"""
        if logical_id not in self.resources:
            return self.put(logical_id, resource)
        return self.resources[logical_id]
