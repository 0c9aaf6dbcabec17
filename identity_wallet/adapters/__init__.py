"""Adapters layer for the identity wallet.

This layer contains the adapters that translate between the core domain
and external systems (databases, in-process storage).
"""
