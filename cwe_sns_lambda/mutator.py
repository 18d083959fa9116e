"""
Applies cweSns events to a shared CloudFormation template
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, Mapping, MutableMapping, Optional

from .config import EventConfig, normalize_config
from .synthesizers import synthesize
from .template import Template
from .utils import log_structured

EVENT_KEY = "cweSns"

# Handlers are configured by the application, see setup_logger
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EventRequest:
    """One cweSns event declared on one function"""

    function_name: str
    stage: str
    service_name: str
    raw_config: Mapping[str, Any]


class TemplateMutator:
    """
    Normalizes each requested event and runs the synthesis pipeline for it.

    Events are processed strictly in order against the same template, so a
    later event sees and extends the shared resources of earlier ones.
    """

    def __init__(self, verbose: bool = False) -> None:
        self.verbose = verbose

    def add_cwe_sns_resources(self, template: Template, request: EventRequest) -> EventConfig:
        """Add the resources for a single event and return its normalized config"""
        config = normalize_config(
            request.function_name,
            request.stage,
            request.service_name,
            request.raw_config,
        )
        log_structured(
            logger,
            logging.INFO if self.verbose else logging.DEBUG,
            "Adding cweSns event handler",
            function=request.function_name,
            config=dict(request.raw_config),
        )
        synthesize(template, config)
        return config

    def apply(self, template: Template, requests: Iterable[EventRequest]) -> Template:
        for request in requests:
            self.add_cwe_sns_resources(template, request)
        return template


def iter_event_requests(
    service_definition: Mapping[str, Any], stage: Optional[str] = None
) -> Iterator[EventRequest]:
    """
    Yield an EventRequest for every cweSns event in a service definition.

    Functions and their events keep their declaration order.
    """
    service_name = service_definition["service"]
    stage = stage or service_definition.get("provider", {}).get("stage", "dev")

    for function_name, function in (service_definition.get("functions") or {}).items():
        for event in (function or {}).get("events") or []:
            if isinstance(event, Mapping) and EVENT_KEY in event:
                yield EventRequest(
                    function_name=function_name,
                    stage=stage,
                    service_name=service_name,
                    raw_config=event[EVENT_KEY],
                )


def modify_template(
    service_definition: Mapping[str, Any],
    template_body: MutableMapping[str, Any],
    stage: Optional[str] = None,
    verbose: bool = False,
) -> MutableMapping[str, Any]:
    """Add the resources for every cweSns event of a service to its template"""
    template = Template(template_body)
    TemplateMutator(verbose=verbose).apply(
        template, iter_event_requests(service_definition, stage=stage)
    )
    return template_body
