"""Lightweight telemetry for estimate timings."""

from __future__ import annotations
import time
import json
import pathlib
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional, Union


PathLike = Union[str, pathlib.Path]


def log_event(obj: dict, path: PathLike) -> None:
    """Append a telemetry event to a JSONL file."""
    log = pathlib.Path(path)
    log.parent.mkdir(parents=True, exist_ok=True)
    with log.open("a", encoding="utf-8") as f:
        f.write(json.dumps(obj, ensure_ascii=False) + "\n")


@contextmanager
def probe(label: str, path: Optional[PathLike], meta: Optional[Dict[str, Any]] = None) -> Iterator[Dict[str, Any]]:
    """
    Time the enclosed block and record it as one JSONL event.

    Args:
        label: What was estimated (sample label, "User Input", ...)
        path: Telemetry file; when None nothing is measured or written
        meta: Extra fields to record. The yielded dict is the same object, so
            callers can add results (token counts, mode) while inside the block.
    """
    meta = {} if meta is None else meta
    if path is None:
        yield meta
        return

    t0 = time.perf_counter()
    err = None
    try:
        yield meta
    except Exception as e:
        err = repr(e)
        raise
    finally:
        ms = (time.perf_counter() - t0) * 1000.0
        log_event({
            "ts": time.time(),
            "label": label,
            "observed_ms": ms,
            "meta": meta,
            "error": err,
        }, path)
