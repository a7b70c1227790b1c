"""Logged-in agent model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Agent:
    """Agent session created by the demo login."""

    email: str
    name: str
    logged_in_at: datetime
