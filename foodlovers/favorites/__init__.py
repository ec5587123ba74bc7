"""
Favorite resource.

Responsibilities:
- Record at most one favorite per (user email, review id) pair.
- List a user's favorites joined to their reviews.
- Remove favorites.
"""
