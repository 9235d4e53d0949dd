"""
Task workload types.

A Task runs a component to completion as a Kubernetes Job, with a Service in
front of it when the component listens on a port. A ReplicatedTask runs
several pods of the same Job in parallel.
"""

from typing import Any, Dict

from kubernetes import client
from kubernetes.client.rest import ApiException

from common.core.constants import RestartPolicy, WorkloadRole
from common.core.exceptions import SubmissionError
from common.core.otel_axiom_exporter import get_logger, trace_span
from packages.workloads.builders.job_builder import JobBuilder
from packages.workloads.builders.service_builder import ServiceBuilder
from packages.workloads.models.domain.workload_metadata import WorkloadMetadata

logger = get_logger(__name__)


class TaskWorkload:
    """Creates, inspects and removes the resources of a Task."""

    role = WorkloadRole.TASK

    def __init__(self, meta: WorkloadMetadata):
        self.meta = meta

    def labels(self) -> Dict[str, str]:
        return self.meta.labels(self.role.value)

    def job_builder(self) -> JobBuilder:
        return (
            JobBuilder.new(self.meta.instance_name, self.meta.definition)
            .with_labels(self.labels())
            .with_restart_policy(RestartPolicy.ON_FAILURE.value)
            .with_owner_ref(self.meta.owner_ref)
        )

    def service_builder(self) -> ServiceBuilder:
        return (
            ServiceBuilder.new(self.meta.instance_name, self.meta.definition)
            .with_labels(self.labels())
            .with_owner_ref(self.meta.owner_ref)
        )

    @trace_span
    def add(self) -> None:
        """Submit the Job, then the Service if the component needs one."""
        logger.info(
            f"Adding {self.role.value} {self.meta.instance_name} "
            f"to namespace {self.meta.namespace}"
        )
        self.job_builder().submit(self.meta.client, self.meta.namespace)
        self.service_builder().submit(self.meta.client, self.meta.namespace)

    @trace_span
    def delete(self) -> None:
        """
        Delete the Job and its Service.

        Pods are removed in the background. Resources that are already gone
        are skipped.
        """
        name = self.meta.instance_name
        namespace = self.meta.namespace

        try:
            client.BatchV1Api(self.meta.client).delete_namespaced_job(
                name=name,
                namespace=namespace,
                propagation_policy="Background",
            )
            logger.info(f"Deleted job {name} in namespace {namespace}")
        except ApiException as e:
            if e.status != 404:
                raise SubmissionError(
                    f"Failed to delete job {name}: {e}",
                    status=e.status,
                    reason=e.reason,
                    body=e.body,
                ) from e
            logger.info(f"Job {name} already deleted or not found")

        if self.meta.definition.listening_port() is None:
            return

        try:
            client.CoreV1Api(self.meta.client).delete_namespaced_service(
                name=name, namespace=namespace
            )
            logger.info(f"Deleted service {name} in namespace {namespace}")
        except ApiException as e:
            if e.status != 404:
                raise SubmissionError(
                    f"Failed to delete service {name}: {e}",
                    status=e.status,
                    reason=e.reason,
                    body=e.body,
                ) from e
            logger.info(f"Service {name} already deleted or not found")

    def status(self) -> Dict[str, Any]:
        """Check the Job's completion status."""
        name = self.meta.instance_name

        try:
            job = client.BatchV1Api(self.meta.client).read_namespaced_job(
                name=name, namespace=self.meta.namespace
            )
        except ApiException as e:
            if e.status == 404:
                return {"status": "failed", "error": "Job not found"}
            raise SubmissionError(
                f"Failed to check job status: {e}",
                status=e.status,
                reason=e.reason,
                body=e.body,
            ) from e

        if job.status.succeeded and job.status.succeeded > 0:
            return {"status": "completed"}

        if job.status.failed and job.status.failed > 0:
            return {"status": "failed"}

        return {"status": "running"}


class ReplicatedTaskWorkload(TaskWorkload):
    """A Task whose Job runs replica_count pods in parallel."""

    role = WorkloadRole.REPLICATED_TASK

    def __init__(self, meta: WorkloadMetadata, replica_count: int = 1):
        super().__init__(meta)
        self.replica_count = replica_count

    def job_builder(self) -> JobBuilder:
        return super().job_builder().with_parallelism(self.replica_count)
