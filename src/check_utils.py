# -*- coding: utf-8 -*-

def _kv(kw):
    return " ".join(f"{k}={v}" for k, v in kw.items()) if kw else ""

def log_error(msg, **kw):
    print(f"[ERROR] {msg}" + (f" | {_kv(kw)}" if kw else ""))
