"""
HTTP API for the license key service.
"""
