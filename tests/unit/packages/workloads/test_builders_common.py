import pytest
from kubernetes.client.rest import ApiException

from common.core.exceptions import (
    ResourceConflictError,
    SerializationError,
    SubmissionError,
)
from packages.workloads.builders.common import object_meta, serialize, submit_error


class TestObjectMeta:
    def test_copies_labels_and_owners(self, owner_refs):
        """Test that metadata does not share containers with its inputs."""
        labels = {"app": "web"}

        meta = object_meta("web-1", labels, owner_refs)
        labels["extra"] = "x"

        assert meta.labels == {"app": "web"}
        assert meta.owner_references == owner_refs
        assert meta.owner_references is not owner_refs

    def test_no_owners(self):
        meta = object_meta("web-1", {}, None)

        assert meta.owner_references is None


class TestSerialize:
    def test_unencodable_resource(self):
        """Test that values the API cannot encode raise SerializationError."""
        with pytest.raises(SerializationError):
            serialize({"bad": object()})


class TestSubmitError:
    def test_reason_from_status_body(self):
        error = ApiException(status=422, reason="Unprocessable Entity")
        error.body = '{"kind": "Status", "reason": "Invalid"}'

        result = submit_error(error, "Job", "web-1")

        assert type(result) is SubmissionError
        assert result.status == 422
        assert result.reason == "Invalid"
        assert "web-1" in str(result)

    def test_non_json_body_falls_back_to_http_reason(self):
        error = ApiException(status=409, reason="Conflict")
        error.body = "not json"

        result = submit_error(error, "Service", "web-1")

        assert isinstance(result, ResourceConflictError)
        assert result.reason == "Conflict"
