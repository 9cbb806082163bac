import json
import logging

import click

from .discovery import DiscoveryError, DiscoveryService
from .pipeline import CodeGenerationError, CodeGeneratorConfig, ServiceGenerator

logger = logging.getLogger(__name__)


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--namespace", "-n", default=None, type=str, help="Namespace wrapping the generated class")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log each decorator and member added")
@click.argument("path", default=None, type=click.Path(exists=True, resolve_path=True))
@click.argument("output", default=None, type=click.Path(resolve_path=True))
def discovery_to_code(config, namespace, verbose, path, output):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

    with open(path) as f:
        doc = json.load(f)

    if config is not None:
        with open(config) as f:
            config = json.load(f)
            config = CodeGeneratorConfig.from_dict(config)
    else:
        config = CodeGeneratorConfig()

    # CLI namespace overrides the config file
    if namespace:
        config.csharp_namespace = namespace

    try:
        service = DiscoveryService.from_dict(doc)
        out = ServiceGenerator(service, config).generate()
    except (DiscoveryError, CodeGenerationError) as e:
        raise click.ClickException(str(e)) from e

    with open(output, "w") as f:
        f.write(out)
    logger.info("Wrote %s service to %s", service.name, output)
