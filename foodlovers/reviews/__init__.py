"""
Review resource.

Responsibilities:
- Validate review payloads (required fields, rating range, email shape).
- List, search, rank, create, update and delete review documents.
"""
