import pytest
from kubernetes import client
from unittest.mock import MagicMock

from packages.components.models.domain.component import Component, Container, Port


@pytest.fixture
def web_component():
    """Component whose container listens on 8080/TCP."""
    return Component(
        name="web",
        containers=[
            Container(
                name="server",
                image="nginx:latest",
                ports=[Port(name="http", container_port=8080)],
            )
        ],
    )


@pytest.fixture
def batch_component():
    """Component with no declared ports."""
    return Component(
        name="batch",
        containers=[
            Container(name="worker", image="busybox:latest", args=["echo", "done"])
        ],
    )


@pytest.fixture
def owner_refs():
    return [
        client.V1OwnerReference(
            api_version="core.workloads.dev/v1alpha1",
            kind="ApplicationConfiguration",
            name="my-app",
            uid="2a3c1f5e-8d43-4b7e-9f3a-6f2e1c0d9b11",
            controller=True,
            block_owner_deletion=True,
        )
    ]


@pytest.fixture
def api_client():
    """Stand-in for the shared Kubernetes API client handle."""
    return MagicMock(spec=client.ApiClient)
