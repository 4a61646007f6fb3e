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
"""'tagcache ping|set|get|delete': one cache store operation per command."""

from __future__ import annotations

import asyncio
import json
from collections.abc import Coroutine
from typing import Any, TypeVar

import click
from rich.markup import escape

from tagcache.cache.types import TypeTag
from tagcache.cli.console import console, print_error
from tagcache.cli.state import CliState
from tagcache.kernel.exceptions import TagCacheException

T = TypeVar("T")

_TAG_CHOICE = click.Choice(TypeTag.names(), case_sensitive=False)

pass_state = click.make_pass_decorator(CliState, ensure=True)


def _run(operation: Coroutine[Any, Any, T]) -> T:
    """Run one store coroutine, turning library errors into exit status 1."""
    try:
        return asyncio.run(operation)
    except TagCacheException as exc:
        print_error(exc)
        raise SystemExit(1) from exc


def _render(value: Any, tag: TypeTag) -> str:
    if tag is TypeTag.RAW:
        # non-UTF-8 payloads come back as bytes
        return value if isinstance(value, str) else repr(value)
    return json.dumps(value)


@click.command()
@pass_state
def ping_command(state: CliState) -> None:
    """Check that the configured store is reachable."""
    store = state.create_store()
    _run(store.open())
    console.print("[success]✓[/success] store is reachable")


@click.command()
@click.argument("key")
@click.argument("value")
@click.option("--tag", default="raw", type=_TAG_CHOICE, show_default=True, help="Serialization of VALUE.")
@click.option("--ttl", default=None, type=int, help="Expiry in seconds; 0 for none (default: from config).")
@pass_state
def set_command(state: CliState, key: str, value: str, tag: str, ttl: int | None) -> None:
    """Store VALUE under KEY. JSON and XML tags read VALUE as JSON text."""
    type_tag = TypeTag.parse(tag)
    payload: Any = value
    if type_tag is not TypeTag.RAW:
        try:
            payload = json.loads(value)
        except ValueError as exc:
            raise click.BadParameter(f"not valid JSON: {exc}", param_hint="VALUE") from exc

    store = state.create_store()
    _run(store.set(key, type_tag, payload, ttl_seconds=ttl))
    console.print(f"[success]✓[/success] stored [info]{escape(key)}[/info] as {type_tag.name}", highlight=False)


@click.command()
@click.argument("key")
@click.option("--tag", default="raw", type=_TAG_CHOICE, show_default=True, help="Serialization of the stored value.")
@pass_state
def get_command(state: CliState, key: str, tag: str) -> None:
    """Print the value stored under KEY."""
    store = state.create_store()
    type_tag = TypeTag.parse(tag)
    value = _run(store.get(key, type_tag))
    click.echo(_render(value, type_tag))


@click.command()
@click.argument("key")
@pass_state
def delete_command(state: CliState, key: str) -> None:
    """Remove KEY. Deleting a missing key is not an error."""
    store = state.create_store()
    existed = _run(store.delete(key))
    if existed:
        console.print(f"[success]✓[/success] deleted [info]{escape(key)}[/info]", highlight=False)
    else:
        console.print(f"[dim]{escape(key)} did not exist[/dim]", highlight=False)
