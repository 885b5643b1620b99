import threading
from pathlib import Path
from typing import Self
from typing import final

from .base import program_checksum
from .base import read_program


@final
class CppMachine:
    """
    Native machine.

    Building one never fails. The program is read on first use, which is
    where a missing or empty program file raises `MachineLoadError`. There is
    no diagnostic mode. The first read happens under a lock, so concurrent
    first uses all see the same program bytes.
    """

    __slots__ = ("_code", "_lock", "_path")

    def __init__(self, path: Path, code: bytes | None = None) -> None:
        self._path = path
        self._code = code
        self._lock = threading.Lock()

    @classmethod
    def from_file(cls, path: Path) -> Self:
        return cls(path)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={self._path!r})"

    @property
    def path(self) -> Path:
        return self._path

    @property
    def loaded(self) -> bool:
        return self._code is not None

    @property
    def code(self) -> bytes:
        if self._code is None:
            with self._lock:
                if self._code is None:
                    self._code = read_program(self._path)
        return self._code

    def hash(self) -> str:
        return program_checksum(self.code)

    def clone(self) -> Self:
        return type(self)(self._path, self._code)
