"""
Business services for Trip Board.

- http.py: API Gateway proxy response building and best-effort body parsing
- gateway.py: path/method routing from requests to store operations
"""

__all__: list[str] = []
