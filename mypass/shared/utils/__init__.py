"""
Utilities Package

Contents:
=========
- security: Password hashing and access tokens

Usage:
======
    from mypass.shared.utils.security import SecurityUtils
"""

from mypass.shared.utils.security import SecurityUtils

__all__ = [
    "SecurityUtils",
]
