from pathlib import Path

import pytest


@pytest.fixture()
def input_file(tmp_path: Path, input_lines: list[str]) -> Path:
    path = tmp_path / "input.txt"
    path.write_text("\n".join(input_lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _isolate_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Auto-named report files land in tmp_path; env cannot redirect the chain."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("CHAIN_PROVIDER", raising=False)
    monkeypatch.delenv("MIN_REPLICAS_COUNT", raising=False)
