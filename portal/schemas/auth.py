from pydantic import BaseModel, Field
from typing_extensions import Annotated


class UserLoginSchema(BaseModel):
    email: Annotated[str, Field(min_length=1, max_length=255)]
    password: Annotated[str, Field(min_length=1)]


class AdminLoginSchema(BaseModel):
    username: Annotated[str, Field(min_length=1, max_length=255)]
    password: Annotated[str, Field(min_length=1)]
