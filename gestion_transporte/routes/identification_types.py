from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import JSONResponse, RedirectResponse
from sqlalchemy.orm import Session
from typing import List

from gestion_transporte.core.database import get_db
from gestion_transporte.schemas.identification_type import (
    IdentificationTypeForm, IdentificationTypeResponse, IdentificationTypeFormErrors
)
from gestion_transporte.services.identification_type_service import (
    IdentificationTypeService,
    IdentificationTypeNotFoundException,
    IdentificationTypeValidationException,
)

id_type_router = APIRouter(prefix="/identification-types", tags=["Identification Types"])


def _redirect_to_list(request: Request) -> RedirectResponse:
    return RedirectResponse(
        url=str(request.url_for("list_identification_types")),
        status_code=status.HTTP_302_FOUND,
    )


@id_type_router.get("", response_model=List[IdentificationTypeResponse])
def list_identification_types(db: Session = Depends(get_db)):
    return IdentificationTypeService.list_all(db)


@id_type_router.get("/{id_type_id}/edit", response_model=IdentificationTypeResponse)
def get_identification_type_for_edit(id_type_id: int, db: Session = Depends(get_db)):
    try:
        return IdentificationTypeService.get_by_id(db, id_type_id)
    except IdentificationTypeNotFoundException as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@id_type_router.post(
    "/{id_type_id}/edit",
    status_code=status.HTTP_302_FOUND,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": IdentificationTypeFormErrors},
        status.HTTP_404_NOT_FOUND: {"description": "Identification type not found"},
    },
)
def edit_identification_type(
    id_type_id: int,
    form: IdentificationTypeForm,
    request: Request,
    db: Session = Depends(get_db)
):
    """
    Apply an edit and redirect to the list.

    An empty name re-displays the submitted form with the field errors.
    """
    if id_type_id != form.id:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Identification type not found")

    try:
        IdentificationTypeService.update_name(db, id_type_id, form.name)
    except IdentificationTypeNotFoundException as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except IdentificationTypeValidationException as e:
        body = IdentificationTypeFormErrors(errors={e.field: [e.message]}, form=form)
        return JSONResponse(status_code=e.status_code, content=body.model_dump())

    return _redirect_to_list(request)


@id_type_router.post("/{id_type_id}/delete", status_code=status.HTTP_302_FOUND)
def delete_identification_type(id_type_id: int, request: Request, db: Session = Depends(get_db)):
    try:
        IdentificationTypeService.delete(db, id_type_id)
    except IdentificationTypeNotFoundException as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

    return _redirect_to_list(request)
