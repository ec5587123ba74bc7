"""
MongoDB storage layer.

Responsibilities:
- Connect once at startup and bind the reviews/favorites collections.
- Create the search and uniqueness indexes.
- Parse identifiers and turn stored documents into JSON-ready dicts.
"""
