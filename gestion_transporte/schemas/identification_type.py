from pydantic import BaseModel, Field, ConfigDict
from typing import Dict, List, Optional

NAME_LABEL = "Tipo de Identificacion"


# Base schema
class IdentificationTypeBase(BaseModel):
    name: Optional[str] = Field(None, title=NAME_LABEL)

    model_config = ConfigDict(from_attributes=True)


# Edit form; name emptiness is checked by the service so the form can be re-displayed
class IdentificationTypeForm(IdentificationTypeBase):
    id: int


# Response schema
class IdentificationTypeResponse(IdentificationTypeBase):
    id: int


# Validation failure body
class IdentificationTypeFormErrors(BaseModel):
    errors: Dict[str, List[str]]
    form: IdentificationTypeForm
