"""Paired deposit escrow — redeem a target asset against two input deposits."""

__version__ = "0.1.0"
