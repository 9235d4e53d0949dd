from typing import Any, Dict, List, Optional

from kubernetes.client import ApiClient, V1OwnerReference
from pydantic import BaseModel, ConfigDict, Field

from common.core.constants import (
    LABEL_APP_NAME,
    LABEL_COMPONENT,
    LABEL_INSTANCE,
    LABEL_ROLE,
)
from packages.components.models.domain.component import Component

Labels = Dict[str, str]
OwnerRefs = Optional[List[V1OwnerReference]]


class WorkloadMetadata(BaseModel):
    """
    Common data about one running instance of a component.

    Fields are validated upstream and trusted here; only missing required
    fields are rejected at construction.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    # Name of the release
    name: str
    # Name of this particular workload component
    component_name: str
    # Unique name of this component's instance, used for every resource name
    instance_name: str
    # Kubernetes namespace the resources are created in
    namespace: str
    definition: Component
    # Shared Kubernetes API client handle, owned by the caller
    client: ApiClient
    # Parameters supplied for this workload, passed through uninterpreted
    params: Dict[str, Any] = Field(default_factory=dict)
    # Objects that own this workload and cascade-delete it
    owner_ref: OwnerRefs = None

    def labels(self, role: str) -> Labels:
        """Labels shared by resource metadata and Service selectors."""
        return {
            LABEL_APP_NAME: self.name,
            LABEL_COMPONENT: self.component_name,
            LABEL_INSTANCE: self.instance_name,
            LABEL_ROLE: role,
        }
