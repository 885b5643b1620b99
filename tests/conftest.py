from pathlib import Path

import pytest


@pytest.fixture
def program_code() -> bytes:
    return b"\x01\x02\x03avm-program"


@pytest.fixture
def program(tmp_path: Path, program_code: bytes) -> Path:
    path = tmp_path / "prog.bin"
    path.write_bytes(program_code)
    return path
