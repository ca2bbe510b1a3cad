"""
Application Layer
=================

Services and use cases coordinating repository reads.
"""
