"""Tests for the one-shot completion signal."""

import asyncio

import pytest

from wheelspin.core.signal import CompletionSignal


@pytest.mark.asyncio
async def test_await_resumes_after_resolve():
    signal = CompletionSignal("test")

    async def resolve_later():
        await asyncio.sleep(0)
        signal.resolve("done")

    asyncio.create_task(resolve_later())
    assert await signal == "done"
    assert signal.resolved


@pytest.mark.asyncio
async def test_second_resolve_is_a_no_op():
    signal = CompletionSignal()

    assert signal.resolve(1) is True
    assert signal.resolve(2) is False
    assert await signal.wait() == 1


def test_resolve_outside_a_running_loop():
    signal = CompletionSignal()
    signal.resolve()

    async def check():
        return await signal

    assert asyncio.run(check()) is None


@pytest.mark.asyncio
async def test_many_waiters_all_resume():
    signal = CompletionSignal()
    waiters = [asyncio.create_task(signal.wait()) for _ in range(3)]
    await asyncio.sleep(0)

    signal.resolve("go")
    assert await asyncio.gather(*waiters) == ["go", "go", "go"]
