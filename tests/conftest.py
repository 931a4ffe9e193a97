"""Global pytest configuration.

Registers the shared graph fixtures from `tests.sample_data.sample_graphs`.
Listing the module as a plugin (instead of importing it) lets pytest apply
assertion rewriting to it.
"""

from __future__ import annotations

pytest_plugins: list[str] = ["tests.sample_data.sample_graphs"]
