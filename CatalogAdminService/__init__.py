"""
Catalog Admin Service Django project.
"""
