from __future__ import annotations

from typing import Optional, Protocol

from mfakit.domain.entities import MFAPrincipal


class PrincipalDirectoryPort(Protocol):
    def get(self, principal_id: str) -> Optional[MFAPrincipal]:
        """
        Look up the principal by its identifier.
        Return None if not found.
        """
