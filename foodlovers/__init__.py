"""
Food Lovers reviews API.

Responsibilities:
- Store food reviews and per-user favorites in MongoDB.
- Expose CRUD, search and top-rated listings over HTTP.
- Join favorites to their reviews for per-user favorite listings.
"""
