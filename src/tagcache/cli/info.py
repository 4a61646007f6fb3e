# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""'tagcache info': show the effective store configuration."""

from __future__ import annotations

import click
from rich.table import Table

from tagcache import __version__
from tagcache.cache.factory import detect_provider
from tagcache.cache.properties import ConnectionProperties, StoreProperties
from tagcache.cli.console import console
from tagcache.cli.state import CliState


@click.command()
@click.pass_obj
def info_command(state: CliState) -> None:
    """Display the connection settings tagcache would use."""
    config = state.require_config()
    try:
        connection = config.bind(ConnectionProperties)
        store = config.bind(StoreProperties)
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc

    console.print(f"\n[tagcache]tagcache[/tagcache] [dim]v{__version__}[/dim]\n")

    table = Table(title="Store", show_header=False, border_style="dim")
    table.add_column("Key", style="info")
    table.add_column("Value")
    provider = store.provider if store.provider != "auto" else f"auto ({detect_provider()})"
    table.add_row("Provider", provider)
    table.add_row("Address", connection.address)
    table.add_row("Password", "****" if connection.password else "[dim](none)[/dim]")
    table.add_row("Default expiry", f"{connection.default_expiry_seconds}s" if connection.default_expiry_seconds > 0 else "none")
    table.add_row("Legacy get", "yes" if store.legacy_get else "no")
    console.print(table)

    sources = config.loaded_sources
    if sources:
        console.print("[dim]Loaded from:[/dim]")
        for source in sources:
            console.print(f"  [dim]• {source}[/dim]", highlight=False)
    console.print()
