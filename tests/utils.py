from pathlib import Path

DATA_DIR = Path(__file__).resolve().parent / "data"


def board_text(*rows: str) -> str:
    return "".join(row + "\n" for row in rows)


def read_fixture(name: str) -> str:
    return (DATA_DIR / name).read_text()
