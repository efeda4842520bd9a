"""Infrastructure Layer — storage backends and logging setup.

Invariants:
    - Storage backends satisfy core.repository_protocols.PostRepository
    - boto3/botocore exceptions never escape this layer unmapped
"""
