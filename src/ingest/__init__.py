"""Source document reading layer.

This module fetches raw document text from local paths or S3 objects.
Parsing and shape validation are left to the store.
"""
