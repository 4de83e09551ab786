"""Domain layer - Pure business logic.

This layer contains the access-control vocabulary: entities, value objects,
protocols (ports), error types and the static role-permission table. The
domain layer has NO dependencies on any framework or infrastructure.

Structure:
- entities/: Records the pipeline reads (users, projects, memberships)
- value_objects/: Per-request immutable values (Principal, ResolvedScope)
- protocols/: Repository and service interfaces
- errors/: Tagged failure types used in Result values
- role_permissions.py: Role -> permission key -> bool table
"""
