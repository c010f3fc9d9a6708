from fastapi import APIRouter, Depends, HTTPException

from agenda.dependencies.services import get_auth_context_resolver
from agenda.schemas.session import AuthContext, SessionContextRequest
from agenda.services import AuthContextResolver

router = APIRouter()


@router.post("/context", response_model=AuthContext)
async def resolve_session_context(
    req: SessionContextRequest,
    resolver: AuthContextResolver = Depends(get_auth_context_resolver),
):
    context = await resolver.resolve(
        role=req.role,
        user_id=req.user_id,
        organization=req.organization,
        organization_loading=req.organization_loading,
    )
    if context is None:
        raise HTTPException(status_code=404, detail="No se pudo resolver el contexto de la sesión")
    return context
