class DocumentError(ValueError):
    """Uploaded document is unreadable, empty or otherwise unusable."""
