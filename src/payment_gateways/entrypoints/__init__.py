"""Entrypoints layer - Delivery mechanisms.

This layer contains:
- Demo: Console walkthrough of two gateway families

Entrypoints wire infrastructure adapters into use cases
and own process-level setup such as logging configuration.
"""
