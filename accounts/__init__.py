"""
Accounts module - owner registration and authentication.

This module handles:
- Account entity and credential rules
- Password hashing and bearer token issuance/verification
- Account directory (uniqueness and lookup by login)
"""
