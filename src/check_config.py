# src/check_config.py
from __future__ import annotations
import copy
import json

import pytz

from check_timeutil import zone

_DEFAULT = {
    "timezone": "Asia/Seoul",
    "report": {
        "path": None
    }
}

def merge_dict(base: dict, override: dict) -> dict:
    out = dict(base)
    for k, v in (override or {}).items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = merge_dict(out[k], v)
        else:
            out[k] = v
    return out

def _sanitize(cfg: dict) -> dict:
    # 잘못된 값은 항목별로 기본값 복구 (검사 결과/출력에 영향 없음)
    try:
        zone(cfg.get("timezone"))
    except (pytz.UnknownTimeZoneError, TypeError, AttributeError):
        cfg["timezone"] = _DEFAULT["timezone"]
    rep = cfg.get("report")
    if not isinstance(rep, dict):
        cfg["report"] = copy.deepcopy(_DEFAULT["report"])
    elif rep.get("path") is not None and not isinstance(rep.get("path"), str):
        rep["path"] = None
    return cfg

def load_config(path: str = "config.json") -> dict:
    """config.json을 기본값 위에 병합. 읽기/파싱/형식 오류는 조용히 기본값."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            cfg = json.load(f) or {}
    except (OSError, ValueError):
        return copy.deepcopy(_DEFAULT)
    if not isinstance(cfg, dict):
        return copy.deepcopy(_DEFAULT)
    return _sanitize(merge_dict(copy.deepcopy(_DEFAULT), cfg))

def report_config(cfg: dict) -> dict:
    rep = cfg.get("report")
    return rep if isinstance(rep, dict) else dict(_DEFAULT["report"])
