"""
Console logging for the psauc scripts.

Library modules only call logging.getLogger(__name__) and never attach
handlers. A script calls get_logger() once, which puts a single stream
handler on the "psauc" package logger so library DEBUG records show up
when the script asks for them (--verbose).
"""
import logging

PACKAGE = "psauc"
FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


def get_logger(name: str, level=logging.INFO) -> logging.Logger:
    root = logging.getLogger(PACKAGE)
    if not any(getattr(h, "_psauc", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(FORMAT, "%H:%M:%S"))
        handler._psauc = True
        root.addHandler(handler)
        # records stop here; a configured root logger would print them twice
        root.propagate = False
    root.setLevel(level)
    if not name.startswith(PACKAGE):
        name = f"{PACKAGE}.scripts.{name}"
    return logging.getLogger(name)
