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
"""tagcache CLI: inspect and edit tagged cache entries from a shell."""

from __future__ import annotations

from pathlib import Path

import click

from tagcache.cli.console import print_banner
from tagcache.cli.state import CliState
from tagcache.core.config import Config
from tagcache.logging.structlog_adapter import StructlogAdapter


class TagCacheCLI(click.Group):
    """Click group that shows the tagcache header on help."""

    def format_help(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        print_banner()
        super().format_help(ctx, formatter)


@click.group(cls=TagCacheCLI)
@click.version_option(package_name="tagcache")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: tagcache.yaml / tagcache.toml in the current directory).",
)
@click.option("--profile", "profiles", multiple=True, help="Profile overlay to apply; repeatable.")
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, profiles: tuple[str, ...]) -> None:
    """tagcache: get, set and delete tagged values in Redis."""
    state = ctx.ensure_object(CliState)
    if config_path is not None:
        state.config = Config.from_file(config_path, active_profiles=list(profiles))
    elif state.config is None:
        state.config = Config.from_sources(Path.cwd(), active_profiles=list(profiles))

    StructlogAdapter().configure(state.config)


from tagcache.cli.info import info_command
from tagcache.cli.store import delete_command, get_command, ping_command, set_command

cli.add_command(ping_command, name="ping")
cli.add_command(set_command, name="set")
cli.add_command(get_command, name="get")
cli.add_command(delete_command, name="delete")
cli.add_command(info_command, name="info")
