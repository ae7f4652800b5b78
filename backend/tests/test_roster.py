"""Sequential roster runner tests."""

import asyncio
import logging

from agent_platform.roster import DEFAULT_ROSTER, RosterAgent, main, run_roster


def test_run_roster_completes_every_agent_in_order():
    completed = asyncio.run(run_roster(delay_ms=0))
    assert completed == [agent.id for agent in DEFAULT_ROSTER]


def test_unknown_agent_is_skipped_with_warning(caplog):
    roster = [DEFAULT_ROSTER[0], RosterAgent("mystery", "Mystery Agent", "none", "nothing")]
    with caplog.at_level(logging.WARNING, logger="agent_platform.roster"):
        completed = asyncio.run(run_roster(roster, delay_ms=0))
    assert completed == ["uiux-designer"]
    assert "Unknown agent id: mystery" in caplog.text


def test_cli_main_runs_with_zero_delay(caplog):
    with caplog.at_level(logging.INFO, logger="agent_platform.roster"):
        main(["--delay-ms", "0"])
    assert "All agents have completed the pipeline" in caplog.text
