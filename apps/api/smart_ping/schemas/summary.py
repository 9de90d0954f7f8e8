from pydantic import BaseModel, ConfigDict, Field

class SummaryOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    text: str
    update_count: int = Field(..., alias="updateCount")
