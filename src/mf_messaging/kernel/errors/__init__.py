"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    └── ApplicationError          (application.py)
        └── BrokerError           (broker.py)
            ├── AlreadyDestroyedError
            ├── OriginRejectedError
            └── UnknownMessageKindError
"""

from mf_messaging.kernel.errors.application import ApplicationError
from mf_messaging.kernel.errors.base import BaseError
from mf_messaging.kernel.errors.broker import (
    AlreadyDestroyedError,
    BrokerError,
    OriginRejectedError,
    UnknownMessageKindError,
)

__all__ = [
    "AlreadyDestroyedError",
    "ApplicationError",
    "BaseError",
    "BrokerError",
    "OriginRejectedError",
    "UnknownMessageKindError",
]
