"""
Shared plumbing for the Job and Service builders.

Builds object metadata, serializes finalized resources for the API and maps
control-plane errors onto typed exceptions.
"""

import json
from typing import Any, Dict, Optional

from kubernetes import client
from kubernetes.client.rest import ApiException

from common.core.exceptions import (
    ResourceConflictError,
    SerializationError,
    SubmissionError,
)
from packages.workloads.models.domain.workload_metadata import Labels, OwnerRefs

_serializer = client.ApiClient()


def object_meta(name: str, labels: Labels, owner_ref: OwnerRefs) -> client.V1ObjectMeta:
    """Metadata for a finalized resource, copied so it never aliases builder state."""
    return client.V1ObjectMeta(
        name=name,
        labels=dict(labels),
        owner_references=list(owner_ref) if owner_ref is not None else None,
    )


def serialize(resource: Any) -> Dict[str, Any]:
    """Encode a resource into the JSON-ready body the API expects."""
    try:
        body = _serializer.sanitize_for_serialization(resource)
        json.dumps(body)
    except (TypeError, ValueError, AttributeError) as e:
        raise SerializationError(
            f"Failed to serialize {type(resource).__name__}: {e}"
        ) from e
    return body


def submit_error(e: ApiException, kind: str, name: str) -> SubmissionError:
    """Translate an API failure into a typed submission error."""
    reason = _status_reason(e.body) or e.reason
    message = f"Failed to create {kind} {name}: {e.status} {reason}"
    if e.status == 409:
        return ResourceConflictError(
            message, status=e.status, reason=reason, body=e.body
        )
    return SubmissionError(message, status=e.status, reason=reason, body=e.body)


def _status_reason(body: Optional[Any]) -> Optional[str]:
    # Error bodies are v1.Status objects when the API server produced them
    if not body:
        return None
    try:
        status = json.loads(body)
    except (TypeError, ValueError):
        return None
    if isinstance(status, dict):
        return status.get("reason") or None
    return None
