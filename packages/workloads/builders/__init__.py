"""
Builders turning a component instance into Kubernetes Jobs and Services.
"""

from packages.workloads.builders.job_builder import JobBuilder
from packages.workloads.builders.service_builder import ServiceBuilder

__all__ = ["JobBuilder", "ServiceBuilder"]
