import pytest

from dsakit.queues import ArrayQueue, LinkedQueue, QueueOverflow, QueueUnderflow

VALUES = [7, 3, 9, 1, 5]


def make(kind):
    return ArrayQueue(len(VALUES)) if kind == "array" else LinkedQueue()


@pytest.mark.parametrize("kind", ["array", "linked"])
def test_dequeue_preserves_insertion_order(kind):
    queue = make(kind)
    for value in VALUES:
        queue.enqueue(value)
    assert [queue.dequeue() for _ in VALUES] == VALUES
    assert len(queue) == 0


@pytest.mark.parametrize("kind", ["array", "linked"])
def test_iteration_runs_front_to_back(kind):
    queue = make(kind)
    for value in VALUES:
        queue.enqueue(value)
    queue.dequeue()
    assert list(queue) == VALUES[1:]
    assert len(queue) == len(VALUES) - 1


@pytest.mark.parametrize("kind", ["array", "linked"])
def test_empty_queue_underflows(kind):
    queue = make(kind)
    with pytest.raises(QueueUnderflow):
        queue.dequeue()


@pytest.mark.parametrize("kind", ["array", "linked"])
def test_drained_queue_underflows(kind):
    queue = make(kind)
    queue.enqueue(VALUES[0])
    assert queue.dequeue() == VALUES[0]
    with pytest.raises(QueueUnderflow):
        queue.dequeue()


def test_linked_queue_accepts_values_after_draining():
    queue = LinkedQueue()
    queue.enqueue(VALUES[0])
    queue.dequeue()
    queue.enqueue(VALUES[1])
    queue.enqueue(VALUES[2])
    assert list(queue) == [VALUES[1], VALUES[2]]


def test_array_queue_overflows_at_capacity():
    queue = ArrayQueue(2)
    queue.enqueue(VALUES[0])
    queue.enqueue(VALUES[1])
    with pytest.raises(QueueOverflow):
        queue.enqueue(VALUES[2])
    assert list(queue) == VALUES[:2]


def test_array_queue_does_not_reuse_dequeued_slots():
    queue = ArrayQueue(2)
    queue.enqueue(VALUES[0])
    queue.enqueue(VALUES[1])
    queue.dequeue()
    with pytest.raises(QueueOverflow):
        queue.enqueue(VALUES[2])
    assert list(queue) == [VALUES[1]]


def test_array_queue_negative_capacity_is_rejected():
    with pytest.raises(ValueError):
        ArrayQueue(-3)