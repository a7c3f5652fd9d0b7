"""
BookStore Backend: Services Layer
====================================

What:  Business logic between routes (HTTP) and the storage handle.
How:   One EntityService per entity runs the fetch → mutate → persist
       cycle and turns missing rows / storage faults into application
       exceptions.

Service Inventory:
    - entity_service.py: EntityService (generic CRUD over one collection)
    - catalog.py:        book_service, author_service, category_service
"""
