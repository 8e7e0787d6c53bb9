"""
Pre-recorded answers, so that prompts can be answered without a user.

The answers are a flat mapping of question id to answer string, and can be
stored in a JSON file. Answers for ``select()`` are stored as the base-36 id
of the chosen option, so such answers only remain valid as long as the
order of the options does not change.
"""

import os
import json
import logging
import threading

from .errors import (
    AnswerFileNotFound,
    AnswerFileUnreadable,
    AnswerFileEmpty,
    AnswerFileInvalid,
    AnswerFileWriteFailed,
)


logger = logging.getLogger("termask")


class AnswerStore:
    """A thread-safe collection of pre-recorded answers."""

    def __init__(self, answers=None, recording=False):
        self._answers = {}
        self._recording = bool(recording)
        self._lock = threading.RLock()
        if answers:
            self.load(answers)

    def __len__(self):
        with self._lock:
            return len(self._answers)

    def __contains__(self, qid):
        with self._lock:
            return qid in self._answers

    def get(self, qid):
        """Get the answer for the given question id, or None."""
        if not qid:
            return None
        with self._lock:
            return self._answers.get(qid)

    def as_dict(self):
        """Get a copy of the answers."""
        with self._lock:
            return dict(self._answers)

    def load(self, answers, keep_old=False):
        """Load answers from a mapping {question_id: answer}.

        If keep_old is False, the current answers are replaced. Otherwise
        the given answers are merged in, overriding existing ones with
        the same id.
        """
        new = {str(k): str(v) for k, v in dict(answers).items()}
        with self._lock:
            if keep_old:
                self._answers.update(new)
            else:
                self._answers = new
        logger.info(f"loaded {len(new)} answers")

    def load_from_file(self, path, keep_old=False):
        """Load answers from a JSON file."""
        if not os.path.isfile(path):
            raise AnswerFileNotFound(path)
        try:
            with open(path, "rb") as f:
                bb = f.read()
        except OSError as err:
            raise AnswerFileUnreadable(path, err.strerror) from err
        if not bb:
            raise AnswerFileEmpty(path)

        try:
            data = json.loads(bb.decode("utf-8"))
        except UnicodeDecodeError as err:
            raise AnswerFileInvalid(path, "not utf-8") from err
        except json.JSONDecodeError as err:
            raise AnswerFileInvalid(path, str(err)) from err
        if not isinstance(data, dict):
            raise AnswerFileInvalid(path, f"expected an object, got {type(data).__name__}")
        for qid, answer in data.items():
            if not isinstance(answer, (str, int, float)):
                raise AnswerFileInvalid(path, f"answer for {qid!r} is not a string")

        self.load(data, keep_old)

    def save_to_file(self, path):
        """Save the answers to a JSON file."""
        text = json.dumps(self.as_dict(), ensure_ascii=False, indent=4)
        try:
            with open(path, "wb") as f:
                f.write(text.encode("utf-8"))
        except OSError as err:
            raise AnswerFileWriteFailed(path, err.strerror) from err
        logger.info(f"saved answers to {path}")

    # %% Recording

    @property
    def recording(self):
        """Whether answers given by the user are recorded."""
        return self._recording

    def set_recording(self, enabled=True):
        self._recording = bool(enabled)

    def record(self, qid, answer):
        """Store an answer that the user typed, if recording is enabled."""
        if not (qid and self._recording):
            return
        with self._lock:
            self._answers[str(qid)] = str(answer)
        logger.debug(f"recorded answer for {qid!r}")
