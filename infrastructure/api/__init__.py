"""Infrastructure API module."""
from .backend_client import BackendAPIClient
from .retry_policy import RetryPolicy
from .timeout_config import TimeoutConfig

__all__ = [
    'BackendAPIClient',
    'RetryPolicy',
    'TimeoutConfig',
]
