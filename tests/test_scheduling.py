"""Tests for scheduler and selection adapters"""
from __future__ import annotations

import asyncio

import pytest

from agent_workspace.adapters.scheduling import AsyncioScheduler, ImmediateScheduler, ManualScheduler
from agent_workspace.adapters.selection import RandomSelection, SequenceSelection
from agent_workspace.core.models import COLLABORATIVE_AGENT_ID
from agent_workspace.runtime.session import WorkspaceSession


class TestManualScheduler:
    """Test the virtual clock"""

    def test_runs_in_due_order(self):
        scheduler = ManualScheduler()
        calls = []
        scheduler.call_later(2.0, lambda: calls.append("late"))
        scheduler.call_later(1.0, lambda: calls.append("early"))
        scheduler.call_later(1.0, lambda: calls.append("early-second"))

        assert scheduler.advance(1.5) == 2
        assert calls == ["early", "early-second"]
        assert scheduler.now == 1.5
        assert scheduler.pending == 1

        scheduler.advance(1.0)
        assert calls == ["early", "early-second", "late"]

    def test_run_all_drains_nested_calls(self):
        scheduler = ManualScheduler()
        calls = []

        def first():
            calls.append("first")
            scheduler.call_later(5.0, lambda: calls.append("nested"))

        scheduler.call_later(1.0, first)
        assert scheduler.run_all() == 2
        assert calls == ["first", "nested"]
        assert scheduler.pending == 0

    def test_negative_delay_runs_on_next_advance(self):
        scheduler = ManualScheduler()
        calls = []
        scheduler.call_later(-1.0, lambda: calls.append("now"))
        scheduler.advance(0)
        assert calls == ["now"]


class TestImmediateScheduler:
    def test_runs_inline(self):
        calls = []
        ImmediateScheduler().call_later(10.0, lambda: calls.append(1))
        assert calls == [1]


class TestSelection:
    """Test selection adapters"""

    def test_sequence_cycles(self):
        selection = SequenceSelection([0, 2])
        options = ["a", "b", "c"]
        assert [selection.choose(options) for _ in range(4)] == ["a", "c", "a", "c"]

    def test_sequence_randint_clamped(self):
        selection = SequenceSelection([5])
        assert selection.randint(2, 3) == 3

    def test_seeded_random_is_reproducible(self):
        options = list(range(100))
        first = RandomSelection(seed=7)
        second = RandomSelection(seed=7)
        assert [first.choose(options) for _ in range(5)] == [second.choose(options) for _ in range(5)]
        assert 2 <= first.randint(2, 3) <= 3

    def test_empty_options_rejected(self):
        with pytest.raises(ValueError):
            RandomSelection().choose([])
        with pytest.raises(ValueError):
            SequenceSelection().choose([])


class TestAsyncioScheduler:
    """Test replies delivered on a real event loop"""

    @pytest.mark.asyncio
    async def test_replies_arrive_after_delay(self, project, roster):
        session = WorkspaceSession(
            project=project,
            roster=roster,
            scheduler=AsyncioScheduler(),
            selection=RandomSelection(seed=1),
            response_delay=0.01,
        )
        session.submit_message("How is the project going?")
        assert session.pending_dispatches == 1

        await asyncio.sleep(0.05)

        assert session.pending_dispatches == 0
        assert session.messages[-1].agent_id == COLLABORATIVE_AGENT_ID
