from __future__ import annotations
"""Mention Parser - resolves @name tokens in user text to agent ids"""

import re
from typing import Iterable

from ..core.models import Agent

MENTION_PATTERN = re.compile(r"@(\w+)")


def _name_index(agents: Iterable[Agent]) -> dict[str, str]:
    """Lower-cased display name -> agent id; the last agent wins on name clashes"""
    return {agent.name.lower(): agent.id for agent in agents}


def extract_mentions(text: str, agents: Iterable[Agent]) -> list[str]:
    """
    Ids of the agents addressed with @name in `text`.

    Names match case-insensitively and exactly. Unknown names are dropped.
    Order of first appearance is kept and each id appears once.
    """
    index = _name_index(agents)
    mentions: list[str] = []
    for match in MENTION_PATTERN.finditer(text):
        agent_id = index.get(match.group(1).lower())
        if agent_id and agent_id not in mentions:
            mentions.append(agent_id)
    return mentions


def find_unknown_mentions(text: str, agents: Iterable[Agent]) -> list[str]:
    """@name tokens that match no agent, in order, without duplicates"""
    index = _name_index(agents)
    unknown: list[str] = []
    for match in MENTION_PATTERN.finditer(text):
        name = match.group(1)
        if name.lower() not in index and name not in unknown:
            unknown.append(name)
    return unknown
