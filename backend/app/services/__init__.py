# Services package init
"""
Postboard Backend — Services Package
======================================

Service Inventory:
    - post_service.py: CRUD over the posts table (PostService)

Services know nothing about HTTP: they take a db session and plain values,
and raise application exceptions from app.exceptions.
"""
