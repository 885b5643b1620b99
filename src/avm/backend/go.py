from pathlib import Path
from typing import Final

from avm.backend.base import Backend
from avm.machine.base import Machine
from avm.machine.go import GoMachine
from avm.machine_type import MachineType


def load(*, path: Path, warn_mode: bool) -> Machine:
    return GoMachine.from_file(path, warn_mode=warn_mode)


backend: Final = Backend(
    machine_type=MachineType.go,
    load=load,
)
