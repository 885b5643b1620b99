from pathlib import Path
from typing import Annotated
from typing import final

import yaml
from pydantic import BeforeValidator
from pydantic import ValidationInfo
from pydantic import field_validator

from ._utils.pydantic import BaseModel
from .machine_type import MachineType
from .machine_type import parse_machine_type


def coerce_machine_type(value: object) -> object:
    if isinstance(value, str):
        return parse_machine_type(value)
    return value


MachineTypeField = Annotated[
    MachineType,
    BeforeValidator(coerce_machine_type),
]


@final
class LoaderConfig(BaseModel):
    program: Path
    machine_type: MachineTypeField = MachineType.cpp
    warn_mode: bool = False

    @field_validator("program")
    @classmethod
    def resolve_program_path(cls, v: Path, info: ValidationInfo) -> Path:
        if v.is_absolute() or not isinstance(info.context, dict):
            return v
        base_path = info.context.get("base_path")
        if base_path is None:
            return v
        return Path(base_path) / v


def load_config(path: Path) -> LoaderConfig:
    with path.open("rb") as fd:
        loaded = yaml.safe_load(fd)
    return LoaderConfig.model_validate(loaded, context={"base_path": path.parent})
