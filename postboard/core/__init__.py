"""Core Layer — pure post logic, no IO, no boto3.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - All functions are pure and deterministic (time is passed in, never read)
"""
