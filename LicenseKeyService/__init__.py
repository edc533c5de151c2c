"""
License Key Service Django project.
"""
