from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

from common.core.constants import Environment, KubeConfigMode


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Environment Profile
    environment: Environment = Environment.LOCAL

    # Kubernetes
    kube_config_mode: KubeConfigMode = KubeConfigMode.AUTO
    kubeconfig_path: Optional[str] = None  # None uses ~/.kube/config
    kube_context: Optional[str] = None
    default_namespace: str = "default"

    # Observability
    log_level: str = "INFO"
    otel_service_name: str = "kube-workloads"
    axiom_token: Optional[str] = None  # Export is skipped when unset
    axiom_dataset: str = "kube-workloads"


settings = Settings()
