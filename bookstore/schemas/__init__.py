"""
BookStore Backend: API Schemas
=================================

Pydantic models defining the JSON contract. Keys are camelCase on the wire
(`authorId`), snake_case in Python (`author_id`); both are accepted on input.
"""
