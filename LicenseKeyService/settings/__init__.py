"""
Django settings package for LicenseKeyService.

- base.py: settings shared by every environment
- dev.py / test.py / prod.py: per-environment overrides
- logging.py: JSON logging configuration builder
"""
