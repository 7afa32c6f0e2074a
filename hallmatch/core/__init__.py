"""Core Layer - pure matching logic, no IO, no logging, no configuration.

Invariants:
    - No module in core/ imports from services/, schemas/, infrastructure/ or config
    - All functions are pure and deterministic for a given input

Design Decisions:
    - Functional core separated from imperative shell: the builder and validators
      return values, services/ decides what to log and what to raise
"""
