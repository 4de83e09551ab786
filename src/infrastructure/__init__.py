"""Infrastructure layer - Adapters and external integrations.

This layer contains implementations of domain protocols (ports):
- Database repositories (SQLAlchemy async)
- Permission matrix (Casbin)
- Bearer credential verification (PyJWT)
- Structured logging (structlog)

Structure:
- persistence/: Database adapters, models and conflict classification
- authorization/: Casbin permission matrix and model file
- security/: JWT verification
- logging/: Logger adapters

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
