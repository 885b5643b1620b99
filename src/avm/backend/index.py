import os
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Final

from avm.machine.base import Machine
from avm.machine_type import MachineType
from avm.machine_type import parse_machine_type

from . import cpp
from . import go
from . import test
from .base import Backend

backends: Final[Mapping[MachineType, Backend]] = MappingProxyType(
    {
        MachineType.go: go.backend,
        MachineType.cpp: cpp.backend,
        MachineType.test: test.backend,
    }
)


def load_backend(machine_type: MachineType) -> Backend:
    return backends[machine_type]


def load_machine_from_file(
    path: str | os.PathLike[str],
    warn_mode: bool,
    machine_type: str,
) -> Machine:
    """
    Build a machine for the program at `path` using the backend named by
    `machine_type`, matched case-insensitively against "go", "cpp" and "test".

    Raises `InvalidMachineType` for any other name, before any backend is
    touched. Errors from the selected backend propagate unchanged.
    """
    backend = load_backend(parse_machine_type(machine_type))
    return backend.load(path=Path(path), warn_mode=warn_mode)
