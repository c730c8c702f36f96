import asyncio
import logging

import pytest

from pokeloaders.clients.tracing import LoggingObserver, trace
from pokeloaders.services.loading import defer, load_all


class RecordingObserver:
    def __init__(self):
        self.events = []

    def on_start(self, operation, args):
        self.events.append(("start", operation, args))

    def on_finish(self, operation, duration_ms):
        self.events.append(("finish", operation))

    def on_error(self, operation, duration_ms, error):
        self.events.append(("error", operation, str(error)))


# --- trace ---

def test_trace_reports_start_and_finish():
    observer = RecordingObserver()

    with trace(observer, "detail loader", "pikachu"):
        pass

    assert observer.events == [("start", "detail loader", ("pikachu",)), ("finish", "detail loader")]


def test_trace_reports_error_and_reraises():
    observer = RecordingObserver()

    with pytest.raises(ValueError):
        with trace(observer, "types loader"):
            raise ValueError("boom")

    assert observer.events == [("start", "types loader", ()), ("error", "types loader", "boom")]


def test_trace_without_observer_is_a_no_op():
    with trace(None, "anything", 1, 2):
        result = "ran"
    assert result == "ran"


def test_logging_observer_plain_lines(caplog):
    observer = LoggingObserver(colors=False)

    with caplog.at_level(logging.INFO, logger="pokeloaders.trace"):
        observer.on_start("get_pokemon", ("pikachu",))
        observer.on_finish("get_pokemon", 42)
        observer.on_error("get_type", 7, RuntimeError("down"))

    messages = [r.getMessage() for r in caplog.records]
    assert "Starting: get_pokemon (pikachu)" in messages[0]
    assert "Finished: get_pokemon (42ms)" in messages[1]
    assert "Error: get_type (7ms)" in messages[2]
    assert "down" in messages[2]
    assert caplog.records[2].levelno == logging.ERROR
    assert "\x1b[" not in "".join(messages)


def test_logging_observer_colours(caplog):
    observer = LoggingObserver()

    with caplog.at_level(logging.INFO, logger="pokeloaders.trace"):
        observer.on_start("list_pokemon", ())

    message = caplog.records[0].getMessage()
    assert "\x1b[36mStarting:\x1b[0m list_pokemon" in message


# --- load_all / defer ---

@pytest.mark.asyncio
async def test_load_all_keeps_argument_order():
    async def value(v, delay):
        await asyncio.sleep(delay)
        return v

    assert await load_all(value("slow", 0.02), value("fast", 0)) == ["slow", "fast"]


@pytest.mark.asyncio
async def test_load_all_runs_calls_concurrently():
    running = []

    async def call(name):
        running.append(name)
        await asyncio.sleep(0.01)
        # Both calls started before either one finished
        assert set(running) == {"pokemon", "species"}
        return name

    assert await load_all(call("pokemon"), call("species")) == ["pokemon", "species"]


@pytest.mark.asyncio
async def test_load_all_raises_first_failure_and_cancels_the_rest():
    cancelled = asyncio.Event()

    async def slow():
        try:
            await asyncio.sleep(10)
        except asyncio.CancelledError:
            cancelled.set()
            raise

    async def failing():
        raise LookupError("not found")

    with pytest.raises(LookupError):
        await load_all(slow(), failing())

    await asyncio.sleep(0)
    assert cancelled.is_set()


@pytest.mark.asyncio
async def test_defer_starts_work_before_it_is_awaited():
    started = []

    async def work():
        started.append(True)
        return 42

    pending = defer(work())
    assert not pending.done()

    await asyncio.sleep(0)
    assert started == [True]
    assert await pending == 42


@pytest.mark.asyncio
async def test_deferred_failure_surfaces_when_awaited():
    async def failing():
        raise RuntimeError("upstream down")

    pending = defer(failing())

    with pytest.raises(RuntimeError):
        await pending
