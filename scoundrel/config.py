from __future__ import annotations

import os
from dataclasses import dataclass
from dataclasses import replace
from typing import Mapping
from typing import Optional

UI_CHOICES = ("rich", "term")


@dataclass(frozen=True)
class Settings:
    ui: str = "rich"
    seed: Optional[int] = None
    log_level: str = "WARNING"
    log_file: Optional[str] = None


def _env_int(env: Mapping[str, str], key: str) -> Optional[int]:
    raw = (env.get(key) or "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{key} must be an integer (got {raw!r})") from None


def settings_from_env(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Read SCOUNDREL_* variables; unset ones keep their defaults."""
    env = os.environ if env is None else env
    base = Settings()
    ui = (env.get("SCOUNDREL_UI") or base.ui).strip().lower()
    if ui not in UI_CHOICES:
        raise ValueError(f"SCOUNDREL_UI must be one of {', '.join(UI_CHOICES)} (got {ui!r})")
    return Settings(
        ui=ui,
        seed=_env_int(env, "SCOUNDREL_SEED"),
        log_level=(env.get("SCOUNDREL_LOG_LEVEL") or base.log_level).strip().upper(),
        log_file=env.get("SCOUNDREL_LOG_FILE") or None,
    )


def apply_overrides(settings: Settings, **overrides) -> Settings:
    """CLI flags win over the environment; None means 'not given'."""
    given = {k: v for k, v in overrides.items() if v is not None}
    return replace(settings, **given)
