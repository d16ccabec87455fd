from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StrictInt
from pydantic.alias_generators import to_camel

# Limites de uma coluna Integer (int4)
INT32_MIN = -2**31
INT32_MAX = 2**31 - 1

DbInt = Annotated[StrictInt, Field(ge=INT32_MIN, le=INT32_MAX)]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
