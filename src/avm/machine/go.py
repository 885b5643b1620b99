import dataclasses
import sys
from dataclasses import dataclass
from dataclasses import field
from pathlib import Path
from typing import Self
from typing import final

from .base import program_checksum
from .base import read_program


@final
@dataclass(frozen=True, slots=True, kw_only=True)
class GoMachine:
    """Reference machine. The program is read when the machine is built."""

    path: Path
    warn_mode: bool
    code: bytes = field(repr=False)

    @classmethod
    def from_file(cls, path: Path, *, warn_mode: bool) -> Self:
        machine = cls(path=path, warn_mode=warn_mode, code=read_program(path))
        if warn_mode:
            machine.trace(f"loaded {len(machine.code)} bytes, {machine.hash()}")
        return machine

    @property
    def log_prefix(self) -> str:
        return f"[go:{self.path.name}] "

    def trace(self, message: str) -> None:
        print(self.log_prefix, message, sep="", file=sys.stderr)

    def hash(self) -> str:
        return program_checksum(self.code)

    def clone(self) -> Self:
        return dataclasses.replace(self)
