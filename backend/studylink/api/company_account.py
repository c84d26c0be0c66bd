from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from studylink.auth import Principal, get_current_principal
from studylink.database import get_db
from studylink.errors import PermissionDenied
from studylink.models.company import CompanyOwner
from studylink.repositories.companies import CompanyOwnerRepository
from studylink.schemas.owner import CompanyOwnerOut


router = APIRouter()


@router.get("/me", response_model=CompanyOwnerOut)
def my_company(db: Session = Depends(get_db), principal: Principal = Depends(get_current_principal)) -> CompanyOwner:
    """The caller's company ownership, with the company embedded."""
    owner = CompanyOwnerRepository(db).get_by_user_id(principal.user_id)
    if owner is None:
        raise PermissionDenied("Only company owners can access this resource")
    return owner
