"""Presentation layer - HTTP concerns only.

Structure:
- routers/api/middleware: request id middleware, scope resolution and the
  access pipeline dependency
- routers/api/errors: error body, normalizer and exception handlers
- routers/api/routes: route registry (paths, handlers, access policies)
- routers/api/*.py: thin resource handlers

Handlers run only after the access pipeline verified the request; they
contain no authorization logic.
"""
