from pathlib import Path
from typing import Final

from avm.backend.base import Backend
from avm.machine.base import Machine
from avm.machine.test import TestMachine
from avm.machine_type import MachineType


def load(*, path: Path, warn_mode: bool) -> Machine:
    return TestMachine.from_file(path, warn_mode=warn_mode)


backend: Final = Backend(
    machine_type=MachineType.test,
    load=load,
)
