"""
Lifestyle endpoints for API v1.

These routes expose CRUD for lifestyle records.  Reads return JSON;
create, update and delete return a plain text confirmation.  A create
also sets the ``Location`` header to the URL of the new record so
clients can discover the assigned ``lID``.
"""

from typing import List

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import PlainTextResponse

from ...deps import get_lifestyle_service, unwrap
from ....schemas.lifestyle import LifeStyle, LifeStyleCreate
from ....services.lifestyle_service import LifeStyleService

router = APIRouter()


@router.get("", response_class=PlainTextResponse)
def hello(request: Request) -> str:
    """Return a greeting; used as a liveness probe."""
    return f"Hello from {request.url.path.rstrip('/')}/"


@router.get("/all", response_model=List[LifeStyle])
def get_all_lifestyles(
    service: LifeStyleService = Depends(get_lifestyle_service),
) -> List[LifeStyle]:
    """Return every lifestyle record; an empty list when there are none."""
    return service.get_all_lifestyles()


@router.get("/patient/{patient_id}/user/{user_id}", response_model=List[LifeStyle])
def get_lifestyles_by_patient_and_user(
    patient_id: int,
    user_id: int,
    service: LifeStyleService = Depends(get_lifestyle_service),
) -> List[LifeStyle]:
    return service.get_lifestyles_by_patient_id_and_user_id(patient_id, user_id)


@router.get("/{l_id}", response_model=LifeStyle)
def get_lifestyle(
    l_id: int,
    service: LifeStyleService = Depends(get_lifestyle_service),
) -> LifeStyle:
    """Retrieve a lifestyle record by ``lID``.  Returns HTTP 404 if it does not exist."""
    return unwrap(service.get_lifestyle_by_l_id(l_id))


@router.post("", response_class=PlainTextResponse, status_code=status.HTTP_201_CREATED)
def create_lifestyle(
    lifestyle_in: LifeStyleCreate,
    request: Request,
    response: Response,
    service: LifeStyleService = Depends(get_lifestyle_service),
) -> str:
    created = service.create_lifestyle(lifestyle_in)
    response.headers["Location"] = f"{request.url.path.rstrip('/')}/{created.l_id}"
    return "LifeStyle Created Successfully"


@router.put("/{l_id}", response_class=PlainTextResponse)
def update_lifestyle(
    l_id: int,
    lifestyle_in: LifeStyleCreate,
    service: LifeStyleService = Depends(get_lifestyle_service),
) -> str:
    """Replace a lifestyle record.  Returns HTTP 404 if it does not exist."""
    unwrap(service.update_lifestyle(l_id, lifestyle_in))
    return "LifeStyle Updated Successfully"


@router.delete("/{l_id}", response_class=PlainTextResponse)
def delete_lifestyle(
    l_id: int,
    service: LifeStyleService = Depends(get_lifestyle_service),
) -> str:
    unwrap(service.delete_lifestyle(l_id))
    return "LifeStyle Deleted Successfully"
