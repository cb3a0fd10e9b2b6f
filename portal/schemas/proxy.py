from pydantic import BaseModel, Field
from typing_extensions import Annotated


class ReasonSchema(BaseModel):
    reason: Annotated[str, Field(max_length=1000)] = ""
