"""
Core module for shared domain infrastructure.

This module contains:
- Domain event and exception base classes
- The in-process event bus and its handlers
- Middleware, metrics and tracing setup
- Health check views
"""
