from typing import Optional

from kubernetes import client
from kubernetes.client.rest import ApiException
from pydantic import BaseModel, ConfigDict, Field

from common.core.constants import JOB_BACKOFF_LIMIT, RestartPolicy
from common.core.otel_axiom_exporter import get_logger, trace_span
from packages.components.models.domain.component import Component
from packages.workloads.builders.common import object_meta, serialize, submit_error
from packages.workloads.models.domain.workload_metadata import Labels, OwnerRefs

logger = get_logger(__name__)


class JobBuilder(BaseModel):
    """
    Builds batch/v1 Jobs for a component instance.

    Hides most of the Job API, exposing only what workload types configure.
    Every setter returns a new builder; an instance is never mutated.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    component: Component
    labels: Labels = Field(default_factory=dict)
    restart_policy: str = RestartPolicy.NEVER.value
    owner_ref: OwnerRefs = None
    parallelism: Optional[int] = None

    @classmethod
    def new(cls, instance_name: str, component: Component) -> "JobBuilder":
        return cls(name=instance_name, component=component)

    def with_labels(self, labels: Labels) -> "JobBuilder":
        """Replace the labels of the Job and its pod template."""
        return self.model_copy(update={"labels": dict(labels)})

    def with_restart_policy(self, policy: str) -> "JobBuilder":
        # Unknown values are left for the API server to reject
        return self.model_copy(update={"restart_policy": policy})

    def with_owner_ref(self, owner_ref: OwnerRefs) -> "JobBuilder":
        """Set the owner references for the Job and its pods. None clears them."""
        owners = list(owner_ref) if owner_ref is not None else None
        return self.model_copy(update={"owner_ref": owners})

    def with_parallelism(self, count: int) -> "JobBuilder":
        return self.model_copy(update={"parallelism": count})

    def to_resource(self) -> client.V1Job:
        """
        Finalize into a Job.

        The pod template repeats the Job's name, labels and owner references
        so garbage collection reaches the pods themselves.
        """
        return client.V1Job(
            api_version="batch/v1",
            kind="Job",
            metadata=object_meta(self.name, self.labels, self.owner_ref),
            spec=client.V1JobSpec(
                backoff_limit=JOB_BACKOFF_LIMIT,
                parallelism=self.parallelism,
                template=client.V1PodTemplateSpec(
                    metadata=object_meta(self.name, self.labels, self.owner_ref),
                    spec=self.component.to_pod_spec_with_policy(self.restart_policy),
                ),
            ),
        )

    @trace_span
    def submit(self, api_client: client.ApiClient, namespace: str) -> None:
        """
        Create the Job in the given namespace.

        Raises:
            SerializationError: the Job could not be encoded
            ResourceConflictError: a Job with this name already exists
            SubmissionError: the API server rejected the request
        """
        body = serialize(self.to_resource())

        try:
            client.BatchV1Api(api_client).create_namespaced_job(
                namespace=namespace, body=body
            )
        except ApiException as e:
            raise submit_error(e, "Job", self.name) from e

        logger.info(f"Created job {self.name} in namespace {namespace}")
