# chirpy/core/logging.py
import logging
import sys

_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def setup_logging(level: str = "INFO") -> None:
    root = logging.getLogger()
    root.setLevel(level.upper())
    # evita handler duplicado quando create_app roda mais de uma vez (testes)
    if not any(getattr(h, "_chirpy", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._chirpy = True  # type: ignore[attr-defined]
        root.addHandler(handler)
    logging.getLogger("passlib").setLevel(logging.ERROR)
