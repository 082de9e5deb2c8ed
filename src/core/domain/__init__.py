"""Domain models and enumerations.

Pure data structures (Pydantic v2, dataclasses, enums): no HTTP, no CLI.
"""
