"""Services Layer — per-method request handlers and the request dispatcher.

Invariants:
    - Handlers split by concern (read / write / preflight)
    - Dispatch uses an explicit dict mapping (no auto-discovery)
"""
