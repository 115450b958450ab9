import zmq

from bitproto.context import Context


def test_started_by_default():
    context = Context()
    try:
        assert context
        assert isinstance(context.handle(), zmq.Context)
    finally:
        context.stop()


def test_not_started():
    context = Context(started=False)
    assert not context
    assert context.handle() is None


def test_start_twice_fails():
    context = Context(started=False)
    assert context.start() is True
    assert context.start() is False
    assert context.stop() is True


def test_stop_when_stopped_succeeds():
    context = Context(started=False)
    assert context.stop() is True
    assert not context


def test_restart_after_stop():
    context = Context()
    first = context.handle()
    assert context.stop() is True
    assert not context
    assert context.start() is True
    assert context
    assert context.handle() is not first
    context.stop()


def test_context_manager_stops():
    with Context() as context:
        assert context
    assert not context
    assert context.handle() is None


def test_sockets_exchange_messages():
    with Context() as context:
        handle = context.handle()
        pusher = handle.socket(zmq.PUSH)
        puller = handle.socket(zmq.PULL)
        try:
            pusher.bind("inproc://foobar")
            puller.connect("inproc://foobar")
            pusher.send(b"hello world!")
            assert puller.poll(2000) == zmq.POLLIN
            assert puller.recv() == b"hello world!"
        finally:
            pusher.close(linger=0)
            puller.close(linger=0)
    assert not context