"""
Core value type, arithmetic, and function library.

This module contains the foundational building blocks: the Complex value
type, the C99 Annex G special-value machinery, and the JSON contract.
"""
