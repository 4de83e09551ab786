"""Test suite for the Orquestra access pipeline.

Test structure follows the test pyramid:
- unit/: Stages, matrix, normalizer and scope resolution in isolation
- integration/: Real PyJWT, structlog output, repositories on SQLite
- api/: Whole app through TestClient with faked repositories
"""
