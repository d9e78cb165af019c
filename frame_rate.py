import time

_last_time = 0.0
_min_interval = 0.0

def set_fps(fps: float) -> None:
    """Adjust the minimum delay between frames. fps <= 0 disables pacing."""
    global _min_interval
    if fps <= 0:
        _min_interval = 0.0
    else:
        _min_interval = 1.0 / fps

def wait_for_frame() -> None:
    """Block until `_min_interval` seconds have passed since the last frame."""
    global _last_time
    now = time.monotonic()
    elapsed = now - _last_time
    if elapsed < _min_interval:
        time.sleep(_min_interval - elapsed)
    _last_time = time.monotonic()
