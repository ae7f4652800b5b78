"""Sequential agent roster runner.

Invokes each configured agent in order with a fixed simulated delay. There
is no retry, concurrency, or state tracking; the runner only logs progress.

Usage: ``python -m agent_platform.roster [--delay-ms N]``
"""

import argparse
import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

from .config import settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RosterAgent:
    id: str
    name: str
    tool: str
    output: str


DEFAULT_ROSTER: list[RosterAgent] = [
    RosterAgent("uiux-designer", "UI/UX Designer", "FigmaAI+Uizard", "npm:@org/design-system"),
    RosterAgent("webrtc-engineer", "WebRTC Engineer", "LiveKitCLI+AgoraAI", "docker:webrtc-service"),
    RosterAgent("backend-developer", "Backend Developer", "Copilot+OpenAIFunctions", "docker:backend-api"),
    RosterAgent("frontend-developer", "Frontend Developer", "Locofy+MutableAI", "src/pages/**/*.tsx"),
    RosterAgent("payment-specialist", "Payment Specialist", "StripeIQ+PlaidAI", "npm:@org/payments-workspace"),
    RosterAgent("moderation-agent", "Moderation Agent", "OpenAI+PerspectiveAPI", "npm:@org/moderation-service"),
    RosterAgent("devops-engineer", "DevOps Engineer", "HarnessAI+Humanitec", "k8s:deployment-manifests"),
]

# Workflow each known agent simulates.
AGENT_WORKFLOWS: dict[str, str] = {
    "uiux-designer": "Figma AI + Uizard design system",
    "webrtc-engineer": "LiveKit CLI + Agora AI real-time stack",
    "backend-developer": "Copilot + OpenAI Functions service build",
    "frontend-developer": "Locofy + Mutable AI page generation",
    "payment-specialist": "Stripe IQ + Plaid AI payments workspace",
    "moderation-agent": "OpenAI + Perspective API moderation rules",
    "devops-engineer": "Harness AI + Humanitec deployment",
}


async def run_roster(roster: Optional[list[RosterAgent]] = None, delay_ms: Optional[int] = None) -> list[str]:
    """Run every agent in order and return the ids that completed."""

    agents = DEFAULT_ROSTER if roster is None else roster
    delay = (settings.agent_step_delay_ms if delay_ms is None else delay_ms) / 1000
    completed: list[str] = []
    logger.info("Starting agent pipeline agents=%s", len(agents))
    for agent in agents:
        logger.info("Invoking %s using %s", agent.name, agent.tool)
        workflow = AGENT_WORKFLOWS.get(agent.id)
        if workflow is None:
            logger.warning("Unknown agent id: %s", agent.id)
            continue
        logger.info("Running %s workflow: %s", agent.name, workflow)
        await asyncio.sleep(delay)
        logger.info("%s completed, output: %s", agent.name, agent.output)
        completed.append(agent.id)
    logger.info("All agents have completed the pipeline completed=%s", len(completed))
    return completed


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Run the agent roster pipeline.")
    parser.add_argument("--delay-ms", type=int, default=None, help="simulated work per agent")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    asyncio.run(run_roster(delay_ms=args.delay_ms))


if __name__ == "__main__":
    main()
