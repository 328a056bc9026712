"""
Core domain models, symbol mapping primitives, and contracts.

This module contains the foundational building blocks shared by every
check digit algorithm and independent of any concrete checksum scheme.
"""
