"""Line-delimited JSON transport over standard streams."""

from __future__ import annotations

import logging
from typing import TextIO

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from dotline.server.protocol import Envelope, dumps

_LOGGER = logging.getLogger(__name__)


class StreamReader(QObject):
    """Thread-affine worker that reads one request per line.

    Move it to a ``QThread`` and connect the thread's ``started`` signal to
    :meth:`run`; lines reach the main thread through queued delivery.
    """

    line_received = pyqtSignal(str)
    finished = pyqtSignal()

    def __init__(self, stream: TextIO) -> None:
        super().__init__()
        self._stream = stream

    @pyqtSlot()
    def run(self) -> None:
        """Read until end of stream, emitting each non-blank line."""
        try:
            for raw in self._stream:
                line = raw.strip()
                if line:
                    self.line_received.emit(line)
        except OSError as exc:
            _LOGGER.error("Input stream failed: %s", exc)
        finally:
            self.finished.emit()


class StreamWriter(QObject):
    """Writes each outbound envelope as one JSON line."""

    def __init__(self, stream: TextIO, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._stream = stream

    @pyqtSlot(object)
    def write(self, envelope: Envelope) -> None:
        self._stream.write(dumps(envelope) + "\n")
        self._stream.flush()
