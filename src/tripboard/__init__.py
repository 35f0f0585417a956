"""
Core package for Trip Board.

Routing, data access and the HTTP client facade live here.
Lambda handlers in src/handlers/ are thin wrappers that call into tripboard/.
"""

__all__: list[str] = []
