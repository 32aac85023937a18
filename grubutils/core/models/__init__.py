"""
Domain models — Pydantic types for grubutils.

All models are re-exported here for convenient access:

    from grubutils.core.models import Action, Receipt, InvocationRequest, Settings
"""

from grubutils.core.models.action import Action, Receipt
from grubutils.core.models.invocation import InvocationRequest
from grubutils.core.models.settings import Settings

__all__ = [
    "Action",
    "InvocationRequest",
    "Receipt",
    "Settings",
]
