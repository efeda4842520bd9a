"""Pydantic Schemas — proxy event/response envelopes and post payloads.

Invariants:
    - Schemas validate at the system boundary (inbound event, request body)
"""
