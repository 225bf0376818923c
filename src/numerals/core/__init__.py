"""
Core domain models, integer primitives and contracts.

Independent of the engine: definitions, exact arithmetic and validation of
definitions supplied as data.
"""
