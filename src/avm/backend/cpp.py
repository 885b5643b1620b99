from pathlib import Path
from typing import Final

from avm.backend.base import Backend
from avm.machine.base import Machine
from avm.machine.cpp import CppMachine
from avm.machine_type import MachineType


def load(*, path: Path, warn_mode: bool) -> Machine:
    # The native machine has no diagnostic mode, warn_mode is dropped here.
    return CppMachine.from_file(path)


backend: Final = Backend(
    machine_type=MachineType.cpp,
    load=load,
)
