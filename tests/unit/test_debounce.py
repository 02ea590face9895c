"""Unit tests for the debounce gate."""

import asyncio

import pytest

from search_select.core.debounce import DebounceGate


@pytest.mark.asyncio
async def test_burst_fires_once_with_last_term():
    fired = []
    gate = DebounceGate(fired.append, delay=0.02)

    gate.notify("a")
    await asyncio.sleep(0.005)
    gate.notify("ac")
    await asyncio.sleep(0.005)
    last = gate.notify("ace")
    await asyncio.wait({last})

    assert fired == ["ace"]
    assert gate.last_settled == "ace"
    assert not gate.pending


@pytest.mark.asyncio
async def test_superseded_timer_is_cancelled():
    gate = DebounceGate(lambda term: None, delay=0.02)
    first = gate.notify("a")
    second = gate.notify("ab")
    await asyncio.wait({first, second})
    assert first.cancelled()
    assert not second.cancelled()


@pytest.mark.asyncio
async def test_separate_quiet_periods_fire_separately():
    fired = []
    gate = DebounceGate(fired.append, delay=0.01)
    await asyncio.wait({gate.notify("a")})
    await asyncio.wait({gate.notify("b")})
    assert fired == ["a", "b"]


@pytest.mark.asyncio
async def test_cancel_abandons_pending_timer():
    fired = []
    gate = DebounceGate(fired.append, delay=0.01)
    timer = gate.notify("a")
    assert gate.pending
    gate.cancel()
    await asyncio.wait({timer})
    await asyncio.sleep(0.02)
    assert fired == []
    assert not gate.pending


@pytest.mark.asyncio
async def test_closed_gate_ignores_notify():
    fired = []
    gate = DebounceGate(fired.append, delay=0.01)
    gate.close()
    timer = gate.notify("a")
    await asyncio.wait({timer})
    assert fired == []
    assert not gate.pending
