"""A restartable, thread-safe holder of a messaging context."""

import threading

import zmq


class Context:
    """Owns a zmq context that can be started and stopped repeatedly.

    Stopping aborts blocking operations and waits until every socket created
    in the context has been closed.
    """

    def __init__(self, started=True):
        self._lock = threading.Lock()
        self._handle = None
        if started:
            self.start()

    def start(self):
        """Create the context; False if it is already running or fails."""
        with self._lock:
            if self._handle is not None:
                return False
            try:
                self._handle = zmq.Context()
            except zmq.ZMQError:
                self._handle = None
            return self._handle is not None

    def stop(self):
        """Terminate the context; True if it is stopped afterwards cleanly."""
        with self._lock:
            if self._handle is None:
                return True
            try:
                self._handle.term()
                result = True
            except zmq.ZMQError:
                result = False
            self._handle = None
            return result

    def __bool__(self):
        return self._handle is not None

    def handle(self):
        """The running zmq context, or None. May be stopped after return."""
        return self._handle

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.stop()
        return False