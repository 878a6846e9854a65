import threading
import time

import pytest

from termsnake.channel import Disconnected, Empty, channel


def start(target, *args):
    thread = threading.Thread(target=target, args=args, daemon=True)
    thread.start()
    return thread


def poll(receiver, deadline=2.0):
    end = time.monotonic() + deadline
    while time.monotonic() < end:
        try:
            return receiver.try_recv()
        except Empty:
            time.sleep(0.001)
    raise AssertionError("nothing was offered in time")


def test_try_recv_on_idle_channel_is_empty():
    _, receiver = channel()
    with pytest.raises(Empty):
        receiver.try_recv()


def test_try_recv_after_sender_closed_is_disconnected():
    sender, receiver = channel()
    sender.close()
    with pytest.raises(Disconnected):
        receiver.try_recv()


def test_send_blocks_until_the_item_is_taken():
    sender, receiver = channel()
    done = threading.Event()

    def send():
        sender.send("cmd")
        done.set()

    thread = start(send)
    assert not done.wait(0.1)
    assert poll(receiver) == "cmd"
    assert done.wait(2.0)
    thread.join(2.0)


def test_successive_sends_are_delivered_in_order():
    sender, receiver = channel()
    sent = ["first", "second", "third"]

    def send_all():
        with sender:
            for item in sent:
                sender.send(item)

    thread = start(send_all)
    received = [poll(receiver) for _ in sent]
    thread.join(2.0)

    assert received == sent
    with pytest.raises(Disconnected):
        receiver.try_recv()


def test_blocking_recv_times_out_with_empty():
    _, receiver = channel()
    with pytest.raises(Empty):
        receiver.recv(timeout=0.01)


def test_blocking_recv_gets_item_and_then_disconnect():
    sender, receiver = channel()

    def send_one():
        with sender:
            sender.send(42)

    thread = start(send_one)
    assert receiver.recv(timeout=2.0) == 42
    with pytest.raises(Disconnected):
        receiver.recv(timeout=2.0)
    thread.join(2.0)


def test_send_after_receiver_closed_is_disconnected():
    sender, receiver = channel()
    receiver.close()
    with pytest.raises(Disconnected):
        sender.send("late")


def test_closing_receiver_wakes_a_blocked_sender():
    sender, receiver = channel()
    errors = []

    def send():
        try:
            sender.send("pending")
        except Disconnected as exc:
            errors.append(exc)

    thread = start(send)
    time.sleep(0.05)
    receiver.close()
    thread.join(2.0)

    assert not thread.is_alive()
    assert len(errors) == 1


def test_ends_close_when_used_as_context_managers():
    sender, receiver = channel()
    with sender:
        assert not sender.closed
    with receiver:
        pass
    assert sender.closed
    assert receiver.closed


def test_send_on_closed_sender_is_a_usage_error():
    sender, _ = channel()
    sender.close()
    with pytest.raises(ValueError):
        sender.send("x")
