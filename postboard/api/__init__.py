"""API Layer — local development server over the same dispatcher Lambda uses.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Routes translate HTTP <-> proxy events; they hold no post logic
"""
