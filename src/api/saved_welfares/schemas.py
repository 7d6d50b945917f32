from uuid import UUID

from pydantic import BaseModel, Field


class SaveWelfareRequest(BaseModel):
    welfare_id: UUID = Field(..., alias="welfareId")

    class Config:
        populate_by_name = True
