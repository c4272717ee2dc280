from pathlib import Path

def project_root() -> Path:
    # tickerview/paths.py -> tickerview -> project root
    return Path(__file__).resolve().parents[1]

def data_dir() -> Path:
    return project_root() / "data"

def data_path(filename: str) -> Path:
    return data_dir() / filename
