# scanner/session.py

from collections import deque
import uuid

# Only the most recent attempts are kept
HISTORY_LIMIT = 50


class ReaderSession:
    def __init__(self, reader_id: str | None = None, history_limit: int = HISTORY_LIMIT):
        self.reader_id = reader_id or str(uuid.uuid4())
        self.history = deque(maxlen=history_limit)  # chronological, oldest dropped first
        self.closed = False

    def add_history(self, step: str, input_data=None, output_data=None, extra: dict | None = None):
        self.history.append({
            "step": step,
            "input": input_data,
            "output": output_data,
            "extra": extra or {},
        })

    def rejections(self):
        return [h for h in self.history if h["step"] == "prompt_rejected"]
