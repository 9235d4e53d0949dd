from kubernetes import client, config

from common.core.config import settings
from common.core.constants import KubeConfigMode
from common.core.otel_axiom_exporter import get_logger

logger = get_logger(__name__)


def get_api_client() -> client.ApiClient:
    """
    Get a Kubernetes API client based on the configured load mode.

    In ``auto`` mode in-cluster configuration is tried first, falling back to
    the kubeconfig file. The returned client is safe to share between
    concurrent workload pipelines.
    """
    mode = settings.kube_config_mode

    if mode == KubeConfigMode.INCLUSTER:
        config.load_incluster_config()
    elif mode == KubeConfigMode.KUBECONFIG:
        _load_kubeconfig()
    elif mode == KubeConfigMode.AUTO:
        try:
            config.load_incluster_config()
        except config.ConfigException:
            logger.info("Not running in cluster, loading kubeconfig")
            _load_kubeconfig()
    else:
        raise ValueError(f"Unknown kube config mode: {mode}")

    return client.ApiClient()


def _load_kubeconfig() -> None:
    config.load_kube_config(
        config_file=settings.kubeconfig_path, context=settings.kube_context
    )
