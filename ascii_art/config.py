#!/usr/bin/env python3
# ascii_art/config.py
"""
Config loader and defaults for ascii-art.

Goals:
- Single optional JSON file per user.
- Deep-merge of user config over defaults.
- Basic validation with sane fallbacks.
- Never written unless asked to.

Usage:
    from ascii_art.config import Config
    cfg = Config.load()                 # $ASCII_ART_CONFIG or OS-specific path
    defaults = cfg.render_defaults()    # RenderSettings template for parse_args
    ua = cfg["network"]["user_agent"]
"""

from __future__ import annotations

import copy
import json
import os
import platform
import shutil
import tempfile
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from ascii_art.brightness import BrightnessType
from ascii_art.settings import MAX_WIDTH_PIXELS, RenderSettings

# ----------------------------
# Defaults
# ----------------------------

DEFAULT_CONFIG: Dict[str, Any] = {
    "render": {
        "width": MAX_WIDTH_PIXELS,        # 0..105
        "brightness_type": "Luminosity",  # Average | MinMax | Luminosity
        "invert": True,                   # dense glyphs for bright pixels on dark terminals
    },
    "network": {
        "user_agent": "ascii-art/1.0",
        "connect_timeout_s": 5.0,
        "read_timeout_s": 15.0,
        "retries": 0,
    },
    "logging": {
        "level": "WARNING",               # art goes to stdout, logs to stderr
        "http_debug": False,
        "file": None,                     # path or None
        "rotate_bytes": 5 * 1024 * 1024,
        "rotate_keep": 3,
    },
}

# ----------------------------
# Helpers
# ----------------------------

def _os_config_home() -> str:
    """Return per-OS config base directory."""
    if platform.system() == "Windows":
        base = os.environ.get("APPDATA") or os.path.expanduser("~\\AppData\\Roaming")
        return os.path.join(base, "AsciiArt")
    if platform.system() == "Darwin":
        return os.path.join(os.path.expanduser("~/Library/Application Support"), "AsciiArt")
    return os.path.join(os.path.expanduser("~/.config"), "ascii_art")

def _default_config_path() -> str:
    """Resolve default config path, honoring ASCII_ART_CONFIG env override."""
    env = os.environ.get("ASCII_ART_CONFIG")
    if env:
        return os.path.expanduser(env)
    return os.path.join(_os_config_home(), "ascii_art.json")

def _deep_merge(a: Dict[str, Any], b: Dict[str, Any]) -> Dict[str, Any]:
    """Return deep-merged copy of dicts: values in b override a."""
    out = dict(a)
    for k, v in b.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out

def _atomic_write_json(path: str, data: Dict[str, Any]) -> None:
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    fd, tmp = tempfile.mkstemp(prefix=".tmp_cfg_", dir=os.path.dirname(path) or ".")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, sort_keys=True)
            f.write("\n")
        os.replace(tmp, path)
    except Exception:
        try:
            os.remove(tmp)
        except OSError:
            pass
        raise

def _coerce_num(v: Any, default: float, minmax: Optional[Tuple[float, float]] = None) -> float:
    try:
        x = float(v)
    except (TypeError, ValueError):
        return float(default)
    if minmax:
        lo, hi = minmax
        x = min(hi, max(lo, x))
    return x

def _coerce_int(v: Any, default: int, minmax: Optional[Tuple[int, int]] = None) -> int:
    if isinstance(v, bool):
        return int(default)
    try:
        x = int(v)
    except (TypeError, ValueError):
        return int(default)
    if minmax:
        lo, hi = minmax
        x = min(hi, max(lo, x))
    return x

def _coerce_bool(v: Any, default: bool) -> bool:
    if isinstance(v, bool):
        return v
    if isinstance(v, str):
        s = v.strip().lower()
        if s in ("1", "true", "yes", "on"): return True
        if s in ("0", "false", "no", "off"): return False
    return default

# ----------------------------
# Validation
# ----------------------------

def _validate(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Return validated copy with fallbacks applied."""
    c = _deep_merge(copy.deepcopy(DEFAULT_CONFIG), cfg or {})
    for section, defaults in DEFAULT_CONFIG.items():
        if not isinstance(c.get(section), dict):
            c[section] = copy.deepcopy(defaults)

    # render
    r = c["render"]
    r["width"] = _coerce_int(r.get("width"), DEFAULT_CONFIG["render"]["width"], (0, MAX_WIDTH_PIXELS))
    bt = r.get("brightness_type")
    if not isinstance(bt, str) or bt not in BrightnessType.__members__:
        r["brightness_type"] = DEFAULT_CONFIG["render"]["brightness_type"]
    r["invert"] = _coerce_bool(r.get("invert"), DEFAULT_CONFIG["render"]["invert"])

    # network
    n = c["network"]
    n["user_agent"] = str(n.get("user_agent") or DEFAULT_CONFIG["network"]["user_agent"])
    n["connect_timeout_s"] = _coerce_num(n.get("connect_timeout_s"), 5.0, (0.2, 60.0))
    n["read_timeout_s"]    = _coerce_num(n.get("read_timeout_s"), 15.0, (0.5, 120.0))
    n["retries"]           = _coerce_int(n.get("retries"), 0, (0, 10))

    # logging
    lg = c["logging"]
    level = str(lg.get("level") or "").upper()
    if level not in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"):
        level = DEFAULT_CONFIG["logging"]["level"]
    lg["level"] = level
    lg["http_debug"] = _coerce_bool(lg.get("http_debug"), DEFAULT_CONFIG["logging"]["http_debug"])
    lf = lg.get("file")
    lg["file"] = str(lf) if lf else None
    lg["rotate_bytes"] = _coerce_int(lg.get("rotate_bytes"), DEFAULT_CONFIG["logging"]["rotate_bytes"], (256 * 1024, 50 * 1024 * 1024))
    lg["rotate_keep"]  = _coerce_int(lg.get("rotate_keep"), DEFAULT_CONFIG["logging"]["rotate_keep"], (0, 50))

    return c

# ----------------------------
# Public API
# ----------------------------

@dataclass
class Config:
    """Thin wrapper around a nested dict with load and validation."""
    data: Dict[str, Any] = field(default_factory=lambda: _validate({}))
    path: str = field(default_factory=_default_config_path)

    # --- Mapping-style access
    def __getitem__(self, k: str) -> Any:
        return self.data[k]

    # --- Ops
    @classmethod
    def load(cls, path: Optional[str] = None, create_if_missing: bool = False) -> "Config":
        cfg_path = os.path.expanduser(path) if path else _default_config_path()
        if not os.path.exists(cfg_path):
            cfg = _validate({})
            if create_if_missing:
                _atomic_write_json(cfg_path, cfg)
            return cls(cfg, cfg_path)

        try:
            with open(cfg_path, "r", encoding="utf-8") as f:
                user_cfg = json.load(f)
            if not isinstance(user_cfg, dict):
                raise ValueError("top-level JSON value must be an object")
        except (OSError, ValueError):
            # Corrupt file. Keep a copy and fall back to defaults.
            try:
                shutil.copyfile(cfg_path, cfg_path + ".corrupt.bak")
            except OSError:
                pass
            user_cfg = {}

        return cls(_validate(user_cfg), cfg_path)

    def render_defaults(self, image_path: str = "") -> RenderSettings:
        """RenderSettings carrying the configured defaults for omitted arguments."""
        r = self.data["render"]
        return RenderSettings(
            image_path=image_path,
            width=r["width"],
            brightness_type=BrightnessType[r["brightness_type"]],
            invert=r["invert"],
        )


__all__ = [
    "Config",
    "DEFAULT_CONFIG",
    "_default_config_path",
]
