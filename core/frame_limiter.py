"""Timestamp-gated frame rate limiter."""


class FrameLimiter:
    """Lets a frame through only once more than 1000/fps ms have passed since the last one."""

    def __init__(self, fps: float):
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        self.fps = float(fps)
        self.interval_ms = 1000.0 / self.fps
        self.last_frame_ms = float("-inf")

    def ready(self, now_ms: float) -> bool:
        """Return True (and record the frame) if a frame is due at now_ms."""
        if now_ms > self.last_frame_ms + self.interval_ms:
            self.last_frame_ms = now_ms
            return True
        return False

    def reset(self):
        self.last_frame_ms = float("-inf")
