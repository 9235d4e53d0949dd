from unittest.mock import patch

from packages.workloads.builders import JobBuilder, ServiceBuilder


class TestPipelineScenarios:
    """End-to-end builder pipelines with mocked K8s."""

    @patch("kubernetes.client.CoreV1Api")
    @patch("kubernetes.client.BatchV1Api")
    def test_web_component(
        self, mock_batch_api, mock_core_api, web_component, api_client
    ):
        """Test a component listening on 8080 gets a Job and a Service."""
        labels = {"app": "web"}
        job_builder = JobBuilder.new("web-1", web_component).with_labels(labels)
        service_builder = ServiceBuilder.new("web-1", web_component).with_labels(labels)

        job = job_builder.to_resource()
        service = service_builder.to_resource()

        assert job.metadata.name == "web-1"
        assert job.spec.template.metadata.name == "web-1"
        assert job.spec.template.metadata.labels == labels
        assert service.metadata.name == "web-1"
        assert service.spec.selector == labels
        assert len(service.spec.ports) == 1
        assert service.spec.ports[0].port == 8080
        assert service.spec.ports[0].target_port == 8080
        assert service.spec.ports[0].protocol == "TCP"

        job_builder.submit(api_client, "default")
        service_builder.submit(api_client, "default")

        assert (
            mock_batch_api.return_value.create_namespaced_job.call_args[1]["namespace"]
            == "default"
        )
        assert (
            mock_core_api.return_value.create_namespaced_service.call_args[1][
                "namespace"
            ]
            == "default"
        )

    @patch("kubernetes.client.CoreV1Api")
    @patch("kubernetes.client.BatchV1Api")
    def test_batch_component(
        self, mock_batch_api, mock_core_api, batch_component, api_client
    ):
        """Test a component without ports gets only a Job."""
        job_builder = JobBuilder.new("batch-1", batch_component)
        service_builder = ServiceBuilder.new("batch-1", batch_component)

        assert job_builder.to_resource().metadata.name == "batch-1"
        assert service_builder.to_resource() is None

        job_builder.submit(api_client, "default")
        service_builder.submit(api_client, "default")

        mock_batch_api.return_value.create_namespaced_job.assert_called_once()
        mock_core_api.return_value.create_namespaced_service.assert_not_called()
