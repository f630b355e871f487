"""Small concurrency patterns: threads, locks, condition variables and listeners."""

from __future__ import annotations

import argparse
import random
import sys
import threading
import time
from collections import deque
from enum import Enum, IntEnum

_UNRECOGNISED = "Command is not recognized! Enter add, sub, val or stop commands"


def hello() -> str:
    """The greeting printed by the simplest program."""
    return "Hello World!"


def run_sleeping_thread(pause: float = 2.0) -> list[str]:
    """Run a thread that sleeps ``pause`` seconds; return the messages in order."""
    if pause < 0:
        raise ValueError("pause must not be negative")
    log: list[str] = []
    lock = threading.Lock()

    def say(message: str) -> None:
        with lock:
            log.append(message)

    def work() -> None:
        say(f"Thread function started. Pause {round(pause * 1000)}ms...")
        time.sleep(pause)
        say("Thread function ended!")

    say("Main thread: Starting new thread...")
    thread = threading.Thread(target=work)
    thread.start()
    say("Main thread: New thread started!")
    thread.join()
    say("Main thread: Thread joined")
    return log


def timed_thread(pause: float = 2.0) -> float:
    """Milliseconds spent starting, running and joining a sleeping thread."""
    start = time.perf_counter()
    run_sleeping_thread(pause)
    return (time.perf_counter() - start) * 1000


class ThreadSafeQueue:
    """FIFO queue of integers guarded by a lock."""

    def __init__(self) -> None:
        self._items: deque[int] = deque()
        self._lock = threading.Lock()

    def push(self, value: int) -> None:
        with self._lock:
            self._items.append(value)

    def retrieve_and_delete(self) -> int:
        """Remove and return the front value, or 0 when the queue is empty."""
        with self._lock:
            return self._items.popleft() if self._items else 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)


def producer_consumer(limit: int = 10, delay: float = 1.0) -> list[int]:
    """Producer publishes 0..limit, pausing ``delay`` seconds after each value.

    The consumer takes every non-zero value it sees below ``limit`` and stops
    at ``limit``. Returns the values consumed, in order.
    """
    if limit < 0:
        raise ValueError("limit must not be negative")
    if delay < 0:
        raise ValueError("delay must not be negative")
    cond = threading.Condition()
    count = 0
    consumed: list[int] = []

    def producer() -> None:
        nonlocal count
        for i in range(limit + 1):
            with cond:
                count = i
                cond.notify()
            time.sleep(delay)

    def consumer() -> None:
        nonlocal count
        for _ in range(limit):
            with cond:
                cond.wait_for(lambda: count != 0)
                if count >= limit:
                    break
                consumed.append(count)
                count = 0

    consumer_thread = threading.Thread(target=consumer)
    producer_thread = threading.Thread(target=producer)
    consumer_thread.start()
    producer_thread.start()
    producer_thread.join()
    consumer_thread.join()
    return consumed


def run_error_workers(
    num_workers: int, seed: int | None = None, max_delay: float = 5.0
) -> list[int]:
    """Workers each report error code ``id * 100 + 1`` after a random pause.

    A logger thread collects the codes; they are returned in the order the
    logger processed them. Worker ids start at 1.
    """
    if num_workers < 0:
        raise ValueError("number of workers must not be negative")
    if max_delay < 0:
        raise ValueError("max_delay must not be negative")
    rng = random.Random(seed)
    delays = [rng.uniform(0, max_delay) for _ in range(num_workers)]

    cond = threading.Condition()
    pending: deque[int] = deque()
    processed: list[int] = []
    done = False

    def worker(worker_id: int, pause: float) -> None:
        time.sleep(pause)
        with cond:
            pending.append(worker_id * 100 + 1)
            cond.notify()

    def logger() -> None:
        with cond:
            while True:
                cond.wait_for(lambda: bool(pending) or done)
                while pending:
                    processed.append(pending.popleft())
                if done:
                    return

    logger_thread = threading.Thread(target=logger)
    logger_thread.start()
    workers = [
        threading.Thread(target=worker, args=(worker_id, pause))
        for worker_id, pause in enumerate(delays, start=1)
    ]
    for thread in workers:
        thread.start()
    for thread in workers:
        thread.join()
    with cond:
        done = True
        cond.notify_all()
    logger_thread.join()
    return processed


class WorkerStatus(IntEnum):
    """Life cycle of a worker thread."""

    INIT = 1
    STARTED = 2
    BUSY = 3
    READY = 4


def run_master_workers(num_threads: int, command: float = 10) -> list[float]:
    """Master waits for every worker to start, then issues ``command``.

    Worker ``i`` adds ``command * i`` to its own slot; the slots are returned
    once every worker is READY.
    """
    if num_threads < 0:
        raise ValueError("number of threads must not be negative")
    cond = threading.Condition()
    statuses: list[WorkerStatus | None] = [None] * num_threads
    data = [0.0] * num_threads
    go = threading.Event()
    issued = 0.0

    def set_status(index: int, status: WorkerStatus) -> None:
        with cond:
            statuses[index] = status
            cond.notify_all()

    def worker(index: int) -> None:
        set_status(index, WorkerStatus.INIT)
        set_status(index, WorkerStatus.STARTED)
        go.wait()
        set_status(index, WorkerStatus.BUSY)
        data[index] += issued * index
        set_status(index, WorkerStatus.READY)

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(num_threads)]
    for thread in threads:
        thread.start()
    with cond:
        cond.wait_for(lambda: all(s is WorkerStatus.STARTED for s in statuses))
    issued = command
    go.set()
    with cond:
        cond.wait_for(lambda: all(s is WorkerStatus.READY for s in statuses))
    for thread in threads:
        thread.join()
    return data


class ListenerCommand(Enum):
    """Commands understood by :class:`Listener`."""

    ADD = "add"
    SUB = "sub"
    VALUE = "val"
    STOP = "stop"


class Listener:
    """Background thread that keeps a counter and executes commands one by one."""

    def __init__(self, startup_delay: float = 0.0) -> None:
        if startup_delay < 0:
            raise ValueError("startup delay must not be negative")
        self._startup_delay = startup_delay
        self._commands: "queue.Queue[ListenerCommand]" = queue.Queue()
        self._lock = threading.Lock()
        self._ready = threading.Event()
        self._thread: threading.Thread | None = None
        self._running = False
        self._value = 0
        self.reports: list[str] = []

    def start(self) -> None:
        """Start the thread and wait until it is ready for commands."""
        with self._lock:
            if self._thread is not None:
                raise RuntimeError("listener already started")
            self._thread = threading.Thread(target=self._run, daemon=True)
            self._running = True
        self._thread.start()
        self._ready.wait()

    def _run(self) -> None:
        if self._startup_delay:
            time.sleep(self._startup_delay)
        self._ready.set()
        while True:
            command = self._commands.get()
            try:
                with self._lock:
                    if command is ListenerCommand.STOP:
                        self._running = False
                        break
                    if command is ListenerCommand.ADD:
                        self._value += 1
                    elif command is ListenerCommand.SUB:
                        self._value -= 1
                    else:
                        self.reports.append(f"[listener]\tvalue = {self._value}")
            finally:
                self._commands.task_done()

    def send(self, command: ListenerCommand | str) -> int:
        """Execute ``command`` and return the counter afterwards."""
        try:
            command = ListenerCommand(command)
        except ValueError:
            raise ValueError(_UNRECOGNISED) from None
        with self._lock:
            if not self._running:
                raise RuntimeError("Listener is stopped")
        self._commands.put(command)
        self._commands.join()
        return self.value()

    def stop(self) -> None:
        """Stop the thread; stopping an idle listener does nothing."""
        with self._lock:
            running = self._running
            thread = self._thread
        if running:
            self._commands.put(ListenerCommand.STOP)
            self._commands.join()
        if thread is not None:
            thread.join()

    def value(self) -> int:
        with self._lock:
            return self._value

    def __enter__(self) -> "Listener":
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()


import queue  # noqa: E402  (used in annotations above as a string)


def _run_listener(startup_delay: float) -> None:
    print("Starting Listener...")
    print("[listener]\tstarting...")
    listener = Listener(startup_delay)
    listener.start()
    print("[listener]\trunning...")
    try:
        while True:
            print("> ", end="", flush=True)
            line = sys.stdin.readline()
            if not line:
                break
            command = line.strip()
            if command == "q":
                break
            if not command:
                continue
            try:
                value = listener.send(command)
            except ValueError as exc:
                print(exc)
                continue
            except RuntimeError:
                print("Listener is stopped...")
                continue
            if ListenerCommand(command) is ListenerCommand.VALUE:
                print(f"[listener]\tvalue = {value}")
            elif ListenerCommand(command) is ListenerCommand.STOP:
                print("[listener]\tstopped...")
    finally:
        listener.stop()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Concurrency demonstrations.")
    parser.add_argument(
        "demo",
        nargs="?",
        default="hello",
        choices=("hello", "thread", "timed", "producer", "errors", "master", "listener"),
    )
    parser.add_argument("--pause", type=float, default=2.0)
    parser.add_argument("--threads", type=int, default=4)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--max-delay", type=float, default=5.0)
    parser.add_argument("--command", type=float, default=10)
    parser.add_argument("--startup-delay", type=float, default=0.0)
    args = parser.parse_args(argv)

    if args.demo == "hello":
        print(hello())
    elif args.demo == "thread":
        for line in run_sleeping_thread(args.pause):
            print(line)
    elif args.demo == "timed":
        print(f"Waited {timed_thread(args.pause):g} ms")
    elif args.demo == "producer":
        for value in producer_consumer(10, args.pause / 2):
            print(value)
    elif args.demo == "errors":
        for worker_id in range(1, args.threads + 1):
            print(f"[worker {worker_id}]\trunning...")
        for code in run_error_workers(args.threads, args.seed, args.max_delay):
            print(f"[logger]\tprocessing error:  {code}")
    elif args.demo == "master":
        data = run_master_workers(args.threads, args.command)
        print(" ".join(f"{v:g}" for v in data))
    else:
        _run_listener(args.startup_delay)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())