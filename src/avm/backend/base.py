from dataclasses import dataclass
from pathlib import Path
from typing import Protocol
from typing import final

from avm.machine.base import Machine
from avm.machine_type import MachineType


class Load(Protocol):
    def __call__(
        self,
        *,
        path: Path,
        warn_mode: bool,
    ) -> Machine: ...


@final
@dataclass(frozen=True, slots=True, kw_only=True)
class Backend:
    machine_type: MachineType
    load: Load
    """
    - Build a machine from the program file at `path`.
    - Errors raised by the machine are not caught.
    """
