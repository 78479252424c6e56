"""
REST API for the catalog admin service.
"""
