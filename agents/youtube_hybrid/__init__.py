"""YouTube hybrid agent package."""

from . import agent
