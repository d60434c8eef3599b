"""
Storage Package

JSON-file stand-in for the subscription backend.
"""

from .loader import load_subscriptions, save_subscriptions

__all__ = ["load_subscriptions", "save_subscriptions"]
