"""
Licenses module - license issue and lifecycle.

This module handles:
- License entity and expiry arithmetic
- License key generation
- Lifecycle operations (issue, check, extend, invalidate)
"""
