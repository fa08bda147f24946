from recovery.health.core import validate_dependencies
from recovery.health.interfaces import HealthCheck, HealthReport
from recovery.health.probes import http_probe

__all__ = [
    "HealthCheck",
    "HealthReport",
    "http_probe",
    "validate_dependencies",
]
