"""Concurrency primitives for the asyncio bridge."""

from .wait import Settled, SettledStatus, fulfilled, gather_settled, rejected

__all__ = ["Settled", "SettledStatus", "fulfilled", "gather_settled", "rejected"]
