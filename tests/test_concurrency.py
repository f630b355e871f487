import io
import threading

import pytest

from hpclab.concurrency import (
    Listener,
    ListenerCommand,
    ThreadSafeQueue,
    WorkerStatus,
    hello,
    main,
    producer_consumer,
    run_error_workers,
    run_master_workers,
    run_sleeping_thread,
    timed_thread,
)


def test_hello():
    assert hello() == "Hello World!"


def test_sleeping_thread_message_order():
    log = run_sleeping_thread(0.01)
    assert log[0] == "Main thread: Starting new thread..."
    assert log[-1] == "Main thread: Thread joined"
    assert "Thread function started. Pause 10ms..." in log
    assert log.index("Thread function started. Pause 10ms...") < log.index(
        "Thread function ended!"
    )
    assert len(log) == 5


def test_sleeping_thread_rejects_negative_pause():
    with pytest.raises(ValueError):
        run_sleeping_thread(-1)


def test_timed_thread_waits_at_least_pause():
    assert timed_thread(0.05) >= 50


def test_queue_is_fifo_and_zero_when_empty():
    q = ThreadSafeQueue()
    for v in (5, 7, 9):
        q.push(v)
    assert len(q) == 3
    assert [q.retrieve_and_delete() for _ in range(3)] == [5, 7, 9]
    assert q.retrieve_and_delete() == 0
    assert len(q) == 0


def test_queue_concurrent_pushes_are_all_kept():
    q = ThreadSafeQueue()

    def push_many(base):
        for i in range(200):
            q.push(base + i)

    threads = [threading.Thread(target=push_many, args=(k * 1000,)) for k in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(q) == 800
    drained = sorted(q.retrieve_and_delete() for _ in range(800))
    assert drained == sorted(k * 1000 + i for k in range(4) for i in range(200))


def test_producer_consumer_limit_one_consumes_nothing():
    assert producer_consumer(1, 0.01) == []


def test_producer_consumer_values_increase_below_limit():
    consumed = producer_consumer(5, 0.02)
    assert consumed == sorted(set(consumed))
    assert all(1 <= v < 5 for v in consumed)


def test_producer_consumer_rejects_negative_limit():
    with pytest.raises(ValueError):
        producer_consumer(-1, 0.0)


def test_error_workers_report_all_codes():
    codes = run_error_workers(3, seed=1, max_delay=0.05)
    assert sorted(codes) == [101, 201, 301]


def test_error_workers_none():
    assert run_error_workers(0, seed=1, max_delay=0.0) == []


def test_error_workers_rejects_negative_delay():
    with pytest.raises(ValueError):
        run_error_workers(2, max_delay=-1)


def test_master_workers_apply_command():
    assert run_master_workers(4, 10) == [0.0, 10.0, 20.0, 30.0]


def test_master_workers_zero_threads():
    assert run_master_workers(0, 10) == []


def test_master_workers_zero_command_leaves_data():
    assert run_master_workers(3, 0) == [0.0, 0.0, 0.0]


def test_master_rejects_negative_threads():
    with pytest.raises(ValueError):
        run_master_workers(-2)


def test_worker_status_lookup_by_value():
    assert [WorkerStatus(v) for v in (1, 2, 3, 4)] == [
        WorkerStatus.INIT,
        WorkerStatus.STARTED,
        WorkerStatus.BUSY,
        WorkerStatus.READY,
    ]


def test_listener_counts():
    with Listener() as listener:
        assert listener.send("add") == 1
        assert listener.send(ListenerCommand.ADD) == 2
        assert listener.send("sub") == 1
        listener.send("val")
        assert listener.value() == 1
        assert listener.reports == ["[listener]\tvalue = 1"]


def test_listener_rejects_unknown_command():
    with Listener() as listener:
        with pytest.raises(ValueError, match="not recognized"):
            listener.send("mul")
        assert listener.value() == 0


def test_listener_stopped_refuses_commands():
    listener = Listener()
    listener.start()
    listener.send("add")
    listener.send("stop")
    with pytest.raises(RuntimeError):
        listener.send("add")
    listener.stop()
    assert listener.value() == 1


def test_listener_not_started_refuses_commands():
    with pytest.raises(RuntimeError):
        Listener().send("add")


def test_listener_cannot_start_twice():
    with Listener() as listener:
        with pytest.raises(RuntimeError):
            listener.start()


def test_main_hello(capsys):
    assert main(["hello"]) == 0
    assert capsys.readouterr().out.strip() == "Hello World!"


def test_main_master(capsys):
    assert main(["master", "--threads", "3", "--command", "2"]) == 0
    assert capsys.readouterr().out.strip() == "0 2 4"


def test_main_listener_session(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("add\nadd\nfoo\nval\nq\n"))
    assert main(["listener"]) == 0
    out = capsys.readouterr().out
    assert "[listener]\tvalue = 2" in out
    assert "Command is not recognized!" in out