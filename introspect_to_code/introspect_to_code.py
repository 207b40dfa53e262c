import json
import logging
from pathlib import Path

import click

from .pipeline import CodeGeneratorConfig, CodegenError, PipelineGenerator


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--package", "-p", default=None, type=str, help="Java package of the generated files")
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Fail when a type id is defined twice instead of keeping the last one",
)
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.argument("path", type=click.Path(exists=True, resolve_path=True))
@click.argument("output", type=click.Path(file_okay=False, resolve_path=True))
def introspect_to_code(config, package, strict, verbose, path, output):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    with open(path) as f:
        introspect = json.load(f)
    # Accept a raw JSON-RPC response as well
    if isinstance(introspect, dict) and "result" in introspect and "types" not in introspect:
        introspect = introspect["result"]

    if config is not None:
        with open(config) as f:
            config = CodeGeneratorConfig.from_dict(json.load(f))
    else:
        config = CodeGeneratorConfig()

    # CLI flags override the config file
    if package is not None:
        config.package = package
    if strict:
        config.strict_registration = True

    try:
        files = PipelineGenerator(introspect, config).generate()
    except CodegenError as e:
        raise click.ClickException(str(e)) from e

    out_dir = Path(output)
    out_dir.mkdir(parents=True, exist_ok=True)
    for file_name, code in files.items():
        with open(out_dir / file_name, "w") as f:
            f.write(code)
