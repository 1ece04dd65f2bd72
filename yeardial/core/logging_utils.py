import datetime as _dt

def log(msg: str) -> None:
    """Console log line with a wall-clock timestamp."""
    ts = _dt.datetime.now().strftime("%H:%M:%S")
    print(f"[{ts}] {msg}")
