"""Custom exceptions for atlas layout operations"""


class AtlasLayoutError(Exception):
    """Base exception for atlas layout errors"""
    pass


class LayoutSerializationError(AtlasLayoutError):
    """Layout could not be exported to or imported from its JSON form"""
    pass
