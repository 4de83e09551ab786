"""Application layer - Use cases and orchestration.

This layer orchestrates the access pipeline: principal resolution, scope
verification, ownership authorization and the stage runner that composes
them. It depends on domain protocols only, never on infrastructure.

Structure:
- services/: Pipeline stages, runner and the services behind them
- errors/: RequestRejectedError (DomainError carrier for the HTTP boundary)
"""
