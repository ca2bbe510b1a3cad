"""
Staff Directory
===============

Read-only lookup service for teacher and user records stored in MongoDB.
"""
__version__ = "0.1.0"
