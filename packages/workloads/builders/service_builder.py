import json
from typing import Optional

from kubernetes import client
from kubernetes.client.rest import ApiException
from pydantic import BaseModel, ConfigDict, Field

from common.core.otel_axiom_exporter import get_logger, log_span_event, trace_span
from packages.components.models.domain.component import Component
from packages.workloads.builders.common import object_meta, serialize, submit_error
from packages.workloads.models.domain.workload_metadata import Labels, OwnerRefs

logger = get_logger(__name__)


class ServiceBuilder(BaseModel):
    """
    Builds a Service exposing a component instance's listening port.

    Components without a container port get no Service at all.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    component: Component
    labels: Labels = Field(default_factory=dict)
    owner_ref: OwnerRefs = None

    @classmethod
    def new(cls, instance_name: str, component: Component) -> "ServiceBuilder":
        return cls(name=instance_name, component=component)

    def with_labels(self, labels: Labels) -> "ServiceBuilder":
        """Replace the labels; they double as the Service selector."""
        return self.model_copy(update={"labels": dict(labels)})

    def with_owner_ref(self, owner_ref: OwnerRefs) -> "ServiceBuilder":
        owners = list(owner_ref) if owner_ref is not None else None
        return self.model_copy(update={"owner_ref": owners})

    def to_resource(self) -> Optional[client.V1Service]:
        """Finalize into a Service, or None when the component has no port."""
        port = self.component.listening_port()
        if port is None:
            return None

        return client.V1Service(
            api_version="v1",
            kind="Service",
            metadata=object_meta(self.name, self.labels, self.owner_ref),
            spec=client.V1ServiceSpec(
                selector=dict(self.labels),
                ports=[port.to_service_port()],
            ),
        )

    @trace_span
    def submit(self, api_client: client.ApiClient, namespace: str) -> None:
        """
        Create the Service in the given namespace.

        Succeeds without calling the API when there is no Service to create.

        Raises:
            SerializationError: the Service could not be encoded
            ResourceConflictError: a Service with this name already exists
            SubmissionError: the API server rejected the request
        """
        service = self.to_resource()
        if service is None:
            log_span_event(
                "Not attaching service to pod with no container ports",
                {"workload.instance": self.name},
            )
            return

        body = serialize(service)
        logger.info(f"Service:\n{json.dumps(body, indent=2)}")

        try:
            client.CoreV1Api(api_client).create_namespaced_service(
                namespace=namespace, body=body
            )
        except ApiException as e:
            raise submit_error(e, "Service", self.name) from e
