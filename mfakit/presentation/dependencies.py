from fastapi import HTTPException, Request, status

from mfakit.application.mfa_service import MFAService
from mfakit.domain.ports.principal_directory import PrincipalDirectoryPort


def get_mfa_service(request: Request) -> MFAService:
    # This is set in mfakit.main create_app()
    return request.app.state.mfa_service


def get_principal_directory(request: Request) -> PrincipalDirectoryPort:
    directory = getattr(request.app.state, "principal_directory", None)
    if directory is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="principal directory not configured",
        )
    return directory
