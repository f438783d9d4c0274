"""
Location: python/payark_sdk/resources/__init__.py

Summary:
    Resource classes wrapping individual PayArk API endpoints. Each one
    holds a reference to the shared HttpClient and shapes responses into
    the pydantic models from types.py.
"""

from .checkout import CheckoutResource
from .payments import PaymentsResource
from .projects import ProjectsResource

__all__ = ["CheckoutResource", "PaymentsResource", "ProjectsResource"]
