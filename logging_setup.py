import logging
import sys
from pathlib import Path
from typing import Optional

LOG_FILE_NAME = "calendar.log"


def setup_logging(log_dir: Optional[Path] = None, console_level: int = logging.INFO,
                  file_level: int = logging.DEBUG) -> Optional[Path]:
    """
    Console handler on stderr plus, when ``log_dir`` is writable, a full log
    file there. Call once from main() before the window is built.
    Returns the log file path, or None if only the console is used.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    root.addHandler(ch)

    if log_dir is None:
        return None

    log_file = Path(log_dir) / LOG_FILE_NAME
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_file), encoding="utf-8")
    except OSError as ex:
        logging.getLogger(__name__).warning("file logging disabled: %s", ex)
        return None
    fh.setLevel(file_level)
    fh.setFormatter(fmt)
    root.addHandler(fh)

    logging.captureWarnings(True)
    return log_file
