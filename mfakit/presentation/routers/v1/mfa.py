from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from mfakit.application.mfa_service import MFAService
from mfakit.domain.entities import MFAPrincipal
from mfakit.domain.errors import InvalidState, Misconfigured, UnsupportedChannel
from mfakit.domain.ports.principal_directory import PrincipalDirectoryPort
from mfakit.presentation.dependencies import get_mfa_service, get_principal_directory
from mfakit.schemas.requests import SendCodeIn, VerifyCodeIn
from mfakit.schemas.responses import AcceptedOut, OkOut, ProvisioningUriOut

router = APIRouter(prefix="/mfa", tags=["MFA"])

# One message for wrong, expired and never-issued codes alike.
INVALID_CODE = "invalid or expired code"


def get_principal(
    principal_id: str,
    directory: Annotated[PrincipalDirectoryPort, Depends(get_principal_directory)],
) -> MFAPrincipal:
    principal = directory.get(principal_id)
    if principal is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="unknown principal"
        )
    return principal


@router.post(
    "/{principal_id}/codes",
    status_code=202,
    response_model=AcceptedOut,
)
def post_send_code(
    body: SendCodeIn,
    principal: Annotated[MFAPrincipal, Depends(get_principal)],
    mfa: Annotated[MFAService, Depends(get_mfa_service)],
):
    try:
        mfa.send_numeric_code(principal, via=body.via)
    except UnsupportedChannel as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Misconfigured as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)
        )
    return AcceptedOut()


@router.post("/{principal_id}/codes/verify", response_model=OkOut)
def post_verify_code(
    body: VerifyCodeIn,
    principal: Annotated[MFAPrincipal, Depends(get_principal)],
    mfa: Annotated[MFAService, Depends(get_mfa_service)],
):
    if not mfa.verify_numeric_code(principal, body.code):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_CODE)
    return OkOut()


@router.post("/{principal_id}/totp/verify", response_model=OkOut)
def post_verify_totp(
    body: VerifyCodeIn,
    principal: Annotated[MFAPrincipal, Depends(get_principal)],
    mfa: Annotated[MFAService, Depends(get_mfa_service)],
):
    try:
        ok = mfa.verify_totp(principal, body.code)
    except Misconfigured as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)
        )
    if not ok:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_CODE)
    return OkOut()


@router.get("/{principal_id}/totp/provisioning-uri", response_model=ProvisioningUriOut)
def get_provisioning_uri(
    principal: Annotated[MFAPrincipal, Depends(get_principal)],
    mfa: Annotated[MFAService, Depends(get_mfa_service)],
    issuer: Optional[str] = None,
):
    try:
        uri = mfa.totp_provisioning_uri(principal, issuer=issuer)
    except InvalidState as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except Misconfigured as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)
        )
    return ProvisioningUriOut(uri=uri)
