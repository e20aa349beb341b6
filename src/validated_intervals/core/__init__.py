"""
Core Module - Serialization

Provides:
- Canonical JSON serialization
"""

from .canonical_json import canonical_dumps

__all__ = [
    'canonical_dumps',
]
