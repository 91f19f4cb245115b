"""
Admin Authentication Routes

Same endpoints and behaviour as /auth, backed by the admins table.
Issued tokens carry admin=true and the is_super_admin flag.
"""

from src.api.routes.auth import build_auth_router
from src.app.services.principal_scope import AdminScope

router = build_auth_router(AdminScope(), prefix="/admin/auth", tag="Admin Authentication")
