from __future__ import annotations
import json
from typing import Any, Dict, Optional

from .config import TTL_DEFAULT

def make_msg(proto: str, mtype: str, src: str, dst: str, ttl: Optional[int] = None, headers=None, payload=None) -> Dict[str, Any]:
    return {
        "proto": proto,
        "type": mtype,
        "from": src,
        "to": dst,
        "ttl": TTL_DEFAULT if ttl is None else ttl,
        "headers": headers or [],
        "payload": payload or {}
    }

def encode(msg: Dict[str, Any]) -> str:
    return json.dumps(msg, separators=(',',':'))
