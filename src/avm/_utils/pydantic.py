import pydantic


class BaseModel(
    pydantic.BaseModel,
    frozen=True,
    extra="forbid",
): ...
