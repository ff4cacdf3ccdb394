"""
Core domain models, mathematical primitives, and contracts.

This module contains the CNPJ value type and the building blocks it relies on:
check digit arithmetic, digit coercion, hashing and the serialized-form contract.
"""
