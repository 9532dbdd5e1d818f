import logging
import sys
from typing import Any

import click
import yaml

from resxtranslate import extractor, synchronizer, worklist
from resxtranslate.config import configure_logging, load_config
from resxtranslate.errors import ResxTranslateError

logger = logging.getLogger(__name__)


@click.group()
@click.option("--config-folder", default="config", help="Configuration folder path.")
@click.version_option()
@click.pass_context
def cli(ctx: click.Context, config_folder: str) -> None:
    # config.yml is read by the subcommand, see _defaults()
    ctx.obj = {"config_folder": config_folder}


def _defaults(ctx: click.Context) -> dict[str, Any]:
    if "config" not in ctx.obj:
        try:
            config = load_config(ctx.obj["config_folder"])
        except yaml.YAMLError as exc:
            logger.error(sys._getframe().f_code.co_name + " " + str(exc))
            sys.exit(1)

        configure_logging(config)
        ctx.obj["config"] = config
    return ctx.obj["config"]["defaults"]


@cli.command("scan")
@click.option("--root", required=True, help="Folder to search for resource files.")
@click.option("--pattern", default=None, help="File name pattern, e.g. *.de.resx.")
@click.option("--tag", default=None, help="Marker of resources that need translation.")
@click.option("--output", default=None, help="Worklist file to write.")
@click.pass_context
def scan(ctx: click.Context, root: str, pattern: str | None, tag: str | None, output: str | None) -> None:
    defaults = _defaults(ctx)
    try:
        translations = extractor.scan(
            root, pattern or defaults["file_pattern"], tag or defaults["tag"]
        )
        worklist.save(output or defaults["worklist"], translations)
    except ResxTranslateError as ex:
        logger.error(str(ex))
        sys.exit(1)

    click.echo(f"{len(translations)} resources to translate")


@cli.command("update")
@click.option("--root", required=True, help="Folder the worklist was scanned from.")
@click.option("--worklist", "worklist_path", default=None, help="Worklist file to apply.")
@click.pass_context
def update(ctx: click.Context, root: str, worklist_path: str | None) -> None:
    defaults = _defaults(ctx)
    try:
        translations = worklist.load(worklist_path or defaults["worklist"])
        files = extractor.update(root, translations)
    except ResxTranslateError as ex:
        logger.error(str(ex))
        sys.exit(1)

    click.echo(f"{files} files updated")


@cli.command("sync")
@click.option("--root", required=True, help="Folder to search for resource files.")
@click.option("--tag", default=None, help="Marker prepended to newly added resources.")
@click.option("--log-file", default=None, help="Write the change log to this file.")
@click.pass_context
def sync(ctx: click.Context, root: str, tag: str | None, log_file: str | None) -> None:
    defaults = _defaults(ctx)
    try:
        log = synchronizer.sync(root, tag or defaults["tag"])
    except ResxTranslateError as ex:
        logger.error(str(ex))
        sys.exit(1)

    if log_file:
        with open(log_file, "w", encoding="utf-8") as file:
            file.write(log + "\n")
        logger.info(f"Change log written to {log_file}")
    else:
        click.echo(log)
