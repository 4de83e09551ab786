"""Authorization infrastructure package.

This package contains the Casbin-based permission matrix:
- model.conf: Flat (subject, object, action) model, no role inheritance
- casbin_permission_matrix.py: CasbinPermissionMatrix implementing
  PermissionMatrixProtocol
"""
