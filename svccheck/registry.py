from __future__ import annotations

from pathlib import Path

import yaml

from svccheck.models import Registry, TcpTarget


def load_registry(path: Path) -> Registry:
    """Parse a YAML target file; raises OSError, yaml.YAMLError or ValidationError."""
    if not path.is_file():
        raise FileNotFoundError(f"Registry {path} is not a readable file")
    return Registry.model_validate(yaml.safe_load(path.read_text()) or {})


def target_address(t: TcpTarget) -> str:
    if ":" in t.host:
        return f"[{t.host}]:{t.port}"
    return f"{t.host}:{t.port}"


def endpoints(reg: Registry) -> list[str]:
    return [target_address(t) for t in reg.targets]
