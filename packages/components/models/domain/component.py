"""
Component definition consumed by the workload builders.

A component describes the containers that make up one workload and the
ports they listen on. Schema validation happens upstream; these models only
render themselves into Kubernetes objects.
"""

from typing import List, Optional

from kubernetes import client
from pydantic import BaseModel, Field


class Port(BaseModel):
    """A port a container listens on."""

    name: str
    container_port: int
    protocol: str = "TCP"

    model_config = {"frozen": True}

    def to_container_port(self) -> client.V1ContainerPort:
        return client.V1ContainerPort(
            name=self.name,
            container_port=self.container_port,
            protocol=self.protocol,
        )

    def to_service_port(self) -> client.V1ServicePort:
        """Expose the container port on the same port number of a Service."""
        return client.V1ServicePort(
            name=self.name,
            port=self.container_port,
            target_port=self.container_port,
            protocol=self.protocol,
        )


class EnvVar(BaseModel):
    name: str
    value: str = ""

    model_config = {"frozen": True}


class Container(BaseModel):
    """A single container of a component."""

    name: str
    image: str
    command: List[str] = Field(default_factory=list)
    args: List[str] = Field(default_factory=list)
    env: List[EnvVar] = Field(default_factory=list)
    ports: List[Port] = Field(default_factory=list)
    image_pull_policy: Optional[str] = None

    model_config = {"frozen": True}

    def to_container(self) -> client.V1Container:
        return client.V1Container(
            name=self.name,
            image=self.image,
            command=list(self.command) or None,
            args=list(self.args) or None,
            env=[client.V1EnvVar(name=e.name, value=e.value) for e in self.env]
            or None,
            ports=[p.to_container_port() for p in self.ports] or None,
            image_pull_policy=self.image_pull_policy,
        )


class Component(BaseModel):
    """Domain model for a component definition."""

    name: str
    workload_type: str = "Task"
    containers: List[Container] = Field(default_factory=list)

    model_config = {"frozen": True}

    def to_pod_spec_with_policy(self, restart_policy: str) -> client.V1PodSpec:
        """Render the pod spec; the restart policy is forwarded unchecked."""
        return client.V1PodSpec(
            containers=[c.to_container() for c in self.containers],
            restart_policy=restart_policy,
        )

    def listening_port(self) -> Optional[Port]:
        """First declared port across the containers, if any."""
        for container in self.containers:
            if container.ports:
                return container.ports[0]
        return None
