# logging_setup.py

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

# うるさいサードパーティ
_NOISY_LOGGERS = ("uvicorn.access", "httpx", "httpcore", "multipart")


def setup_logging(level: int | str | None = None, log_file: str | Path | None = None) -> None:
    """
    ルートロガーを 1 回だけ設定する
    - stderr ハンドラ（LOG_LEVEL、デフォルト INFO）
    - LOG_FILE が指定されていればファイルにも全部出す
    """
    level = level or os.getenv("LOG_LEVEL", "INFO").upper()
    log_file = log_file or os.getenv("LOG_FILE")

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # 二重登録を避ける
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(level)
    ch.setFormatter(fmt)
    root.addHandler(ch)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_path), encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.captureWarnings(True)
