"""Body of roast API failures (400, 404, 500, 502). Validation errors keep FastAPI's 422 shape."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


class ErrorDetail(BaseModel):
    model_config = ConfigDict(extra="forbid")
    detail: Annotated[
        str,
        Field(
            description="User-facing message; upstream error text is logged, not returned",
            examples=["GitHub profile not found"],
        ),
    ]
