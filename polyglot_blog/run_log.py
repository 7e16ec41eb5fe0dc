from __future__ import annotations

import json
import traceback
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, TextIO


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _truncate(text: str, *, limit: int) -> str:
    s = str(text or "")
    if limit <= 0:
        return ""
    if len(s) <= limit:
        return s
    return s[: max(0, limit - 1)] + "…"


class RunLogger:
    """
    JSONL log of a migrate or build run.

    One JSON object per line: ``ts``, ``level``, ``event``, ``session_id``
    and, when given, ``lang`` and ``data``.
    """

    def __init__(
        self,
        path: str | Path,
        *,
        overwrite: bool = True,
        session_id: str | None = None,
    ) -> None:
        self._path = Path(path)
        self._overwrite = bool(overwrite)
        self._session_id = (session_id or "").strip() or uuid.uuid4().hex
        self._fp: TextIO | None = None

    @classmethod
    def open(
        cls,
        path: str | Path,
        *,
        overwrite: bool = True,
        session_id: str | None = None,
    ) -> "RunLogger":
        logger = cls(path, overwrite=overwrite, session_id=session_id)
        logger._ensure_open()
        return logger

    @property
    def path(self) -> Path:
        return self._path

    def close(self) -> None:
        if self._fp is not None:
            try:
                self._fp.flush()
            finally:
                self._fp.close()
            self._fp = None

    def __enter__(self) -> "RunLogger":
        self._ensure_open()
        return self

    def __exit__(self, exc_type: object, exc: object, tb: object) -> None:
        self.close()

    def info(self, event: str, *, lang: str | None = None, **data: Any) -> None:
        self.log("INFO", event, lang=lang, **data)

    def warning(self, event: str, *, lang: str | None = None, **data: Any) -> None:
        self.log("WARN", event, lang=lang, **data)

    def error(self, event: str, *, lang: str | None = None, **data: Any) -> None:
        self.log("ERROR", event, lang=lang, **data)

    def exception(
        self,
        event: str,
        *,
        exc: BaseException,
        lang: str | None = None,
        **data: Any,
    ) -> None:
        err = {
            "type": type(exc).__name__,
            "message": _truncate(str(exc), limit=2000),
            "traceback": _truncate(
                "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
                limit=12000,
            ),
        }
        self.log("ERROR", event, lang=lang, error=err, **data)

    def log(self, level: str, event: str, *, lang: str | None = None, **data: Any) -> None:
        record: dict[str, Any] = {
            "ts": _utc_now_iso(),
            "level": (level or "").strip().upper() or "INFO",
            "event": (event or "").strip() or "event",
            "session_id": self._session_id,
        }

        code = (lang or "").strip()
        if code:
            record["lang"] = code

        if data:
            record["data"] = data

        self._write(record)

    def _ensure_open(self) -> TextIO:
        if self._fp is not None:
            return self._fp
        self._path.parent.mkdir(parents=True, exist_ok=True)
        mode = "w" if self._overwrite else "a"
        fp = self._path.open(mode, encoding="utf-8", newline="\n")
        # Reopening after close() appends instead of truncating.
        self._overwrite = False
        self._fp = fp
        return fp

    def _write(self, record: dict[str, Any]) -> None:
        fp = self._ensure_open()
        fp.write(
            json.dumps(
                record,
                ensure_ascii=False,
                sort_keys=True,
                separators=(",", ":"),
                default=str,
            )
            + "\n"
        )
        fp.flush()
