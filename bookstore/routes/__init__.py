"""
BookStore Backend: API Routes Package
========================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - books.py:       GET/POST /books,       GET/PUT/DELETE /books/{id}
    - authors.py:     GET/POST /authors,     GET/PUT/DELETE /authors/{id}
    - categories.py:  GET/POST /categories,  GET/PUT/DELETE /categories/{id}
    - health.py:      GET /health

Routes stay thin: read path/body parameters, call the entity service with
the injected BookStore, set status code and Location header.
"""
