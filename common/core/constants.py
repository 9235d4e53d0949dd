from enum import Enum


class Environment(str, Enum):
    """Environment profiles."""

    LOCAL = "local"
    DEV = "dev"
    STAGING = "staging"
    PRODUCTION = "production"


class KubeConfigMode(str, Enum):
    """How the Kubernetes client configuration is loaded."""

    AUTO = "auto"
    INCLUSTER = "incluster"
    KUBECONFIG = "kubeconfig"


class RestartPolicy(str, Enum):
    """Restart policies recognized by the Kubernetes API for Job pods."""

    ALWAYS = "Always"
    ON_FAILURE = "OnFailure"
    NEVER = "Never"


class WorkloadRole(str, Enum):
    """Workload types that run as Jobs."""

    TASK = "Task"
    REPLICATED_TASK = "ReplicatedTask"


# Retries granted to a Job before the control plane marks it failed
JOB_BACKOFF_LIMIT = 4

# Label keys shared by resource metadata and Service selectors
LABEL_APP_NAME = "app.kubernetes.io/name"
LABEL_COMPONENT = "workloads.dev/component"
LABEL_INSTANCE = "workloads.dev/instance"
LABEL_ROLE = "workloads.dev/role"
