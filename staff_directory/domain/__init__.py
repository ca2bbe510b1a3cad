"""
Domain Layer
============

Entities, repository interfaces and errors. No infrastructure dependencies.
"""
