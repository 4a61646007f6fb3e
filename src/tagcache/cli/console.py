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
"""Shared Rich console for CLI output."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

from tagcache.kernel.exceptions import TagCacheException

TAGCACHE_THEME = Theme({
    "info": "cyan",
    "success": "bold green",
    "warning": "bold yellow",
    "error": "bold red",
    "tagcache": "bold magenta",
    "dim": "dim",
})

console = Console(theme=TAGCACHE_THEME)


def print_banner() -> None:
    """Print the one-line tagcache header shown above help output."""
    from tagcache import __version__

    console.print(f"[tagcache]tagcache[/tagcache] [dim]v{__version__} :: tagged Redis cache client[/dim]")
    console.print("  [dim]Copyright 2026 Firefly Software Solutions Inc. | Apache 2.0 License[/dim]\n")


def print_error(exc: TagCacheException) -> None:
    """Print a library error with its code, as the CLI reports every failure."""
    code = f" [dim]({exc.code})[/dim]" if exc.code else ""
    console.print(f"[error]✗[/error] {escape(str(exc))}{code}", highlight=False)
