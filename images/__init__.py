"""
Images module - stored image files and their catalog metadata.

This module handles:
- Image entity
- Image repository and file storage (ports)
- Local disk storage and Django ORM adapters
- Image lifecycle service (save/replace/delete)
"""
