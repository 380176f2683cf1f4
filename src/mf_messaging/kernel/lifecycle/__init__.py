"""Kernel lifecycle – destroy-aware objects."""
from mf_messaging.kernel.lifecycle.destroyable import Destroyable

__all__ = ["Destroyable"]
