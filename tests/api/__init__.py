"""API tests package.

End-to-end tests through the real FastAPI app using TestClient. Only the
repository factories are overridden; middleware, the access pipeline and
the exception handlers run for real.
"""
