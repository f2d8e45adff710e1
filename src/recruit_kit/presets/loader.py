from pathlib import Path

import yaml
from pydantic import BaseModel


class RolePreset(BaseModel):
    id: str
    label: str
    notes: str


class QuickStartPresets(BaseModel):
    company_context: str
    roles: list[RolePreset]

    def get_role(self, role_id: str) -> RolePreset:
        for role in self.roles:
            if role.id == role_id:
                return role
        raise KeyError(f"Unknown role preset: {role_id}")


PRESETS_PATH = Path(__file__).parent / "quick_start.yaml"


def load_presets(path: str | Path | None = None) -> QuickStartPresets:
    """Load the default company context and quick-start role notes."""
    path = Path(path) if path is not None else PRESETS_PATH
    if not path.exists():
        raise FileNotFoundError(f"Presets file not found: {path}")
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return QuickStartPresets(**data)
