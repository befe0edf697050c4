"""Command-line interface for the AAS API client."""

import json
from pathlib import Path
from typing import Annotated, Any, NoReturn, Optional, TypeVar

import typer
import yaml
from basyx.aas import model
from pydantic import ValidationError

from aas_api_client import __version__, codec
from aas_api_client.config import ClientConfig, ClientSettings, load_config
from aas_api_client.exceptions import ClientError
from aas_api_client.interfaces import (
    AASBasicDiscoveryInterface,
    AASRepositoryInterface,
    BaseInterface,
    ConceptDescriptionRepositoryInterface,
    DescriptionInterface,
    SubmodelRepositoryInterface,
)
from aas_api_client.observability.logging import get_logger, setup_logging
from aas_api_client.query import (
    AASSearchCriteria,
    ConceptDescriptionSearchCriteria,
    PagingInfo,
    SubmodelSearchCriteria,
)

InterfaceT = TypeVar("InterfaceT", bound=BaseInterface)

logger = get_logger(__name__)

app = typer.Typer(
    name="aas-client",
    help="AAS API client: query shells, submodels and registries over the AAS REST API",
    no_args_is_help=True,
)


@app.callback()
def callback(
    ctx: typer.Context,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Path to client.yaml"),
    ] = None,
    url: Annotated[
        Optional[str],
        typer.Option("--url", "-u", help="Service endpoint, overrides the config file"),
    ] = None,
) -> None:
    """AAS API client CLI."""
    settings = ClientSettings()
    if config:
        settings = ClientSettings(config_file=config)
    if url:
        settings = settings.model_copy(update={"base_url": url})
    ctx.obj = settings


def _load(ctx: typer.Context) -> ClientConfig:
    settings: ClientSettings = ctx.obj if ctx.obj is not None else ClientSettings()
    try:
        cfg = load_config(settings)
    except (OSError, ValidationError, yaml.YAMLError) as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(1)
    setup_logging(cfg.observability.log_level, cfg.observability.log_format)
    logger.debug("Using endpoint %s", cfg.base_url)
    return cfg


def _open(ctx: typer.Context, cls: type[InterfaceT]) -> InterfaceT:
    return cls(config=_load(ctx))


def _echo_json(data: Any) -> None:
    typer.echo(json.dumps(codec.to_payload(data), indent=2))


def _fail(error: ClientError) -> NoReturn:
    typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(1)


def _parse_asset_id(raw: str) -> model.SpecificAssetId:
    name, sep, value = raw.partition("=")
    if not sep or not name or not value:
        raise typer.BadParameter(f"expected NAME=VALUE, got {raw!r}")
    return model.SpecificAssetId(name=name, value=value)


LimitOption = Annotated[
    Optional[int],
    typer.Option("--limit", "-n", min=1, help="Return only the first page of this size"),
]


@app.command()
def description(ctx: typer.Context) -> None:
    """List the service profiles the server implements."""
    with _open(ctx, DescriptionInterface) as api:
        try:
            profiles = api.get()
        except ClientError as e:
            _fail(e)
    for profile in profiles:
        typer.echo(profile)


@app.command()
def shells(
    ctx: typer.Context,
    id_short: Annotated[Optional[str], typer.Option("--id-short", help="Filter by idShort")] = None,
    global_asset_id: Annotated[
        Optional[list[str]],
        typer.Option("--global-asset-id", help="Filter by global asset id (repeatable)"),
    ] = None,
    limit: LimitOption = None,
) -> None:
    """List shells as 'id<TAB>idShort'."""
    criteria = AASSearchCriteria(
        global_asset_ids=tuple(global_asset_id or ()), id_short=id_short
    )
    with _open(ctx, AASRepositoryInterface) as api:
        try:
            if limit is None:
                items = api.get_all(criteria=criteria)
            else:
                items = list(api.get_page(PagingInfo(limit=limit), criteria=criteria))
        except ClientError as e:
            _fail(e)
    for shell in items:
        typer.echo(f"{shell.id}\t{shell.id_short or ''}")


@app.command()
def submodels(
    ctx: typer.Context,
    semantic_id: Annotated[
        Optional[str], typer.Option("--semantic-id", help="Filter by semantic id")
    ] = None,
    id_short: Annotated[Optional[str], typer.Option("--id-short", help="Filter by idShort")] = None,
    limit: LimitOption = None,
) -> None:
    """List submodels as 'id<TAB>idShort'."""
    criteria = SubmodelSearchCriteria(semantic_id=semantic_id, id_short=id_short)
    with _open(ctx, SubmodelRepositoryInterface) as api:
        try:
            if limit is None:
                items = api.get_all_metadata(criteria=criteria)
            else:
                items = list(api.get_page_metadata(PagingInfo(limit=limit), criteria=criteria))
        except ClientError as e:
            _fail(e)
    for submodel in items:
        typer.echo(f"{submodel.id}\t{submodel.id_short or ''}")


@app.command()
def shell(
    ctx: typer.Context,
    aas_id: Annotated[str, typer.Argument(help="Shell identifier")],
) -> None:
    """Print a shell as JSON."""
    with _open(ctx, AASRepositoryInterface) as api:
        try:
            aas = api.aas_interface(aas_id).get()
        except ClientError as e:
            _fail(e)
    _echo_json(aas)


@app.command()
def submodel(
    ctx: typer.Context,
    submodel_id: Annotated[str, typer.Argument(help="Submodel identifier")],
    value: Annotated[
        bool, typer.Option("--value", help="Print the value-only representation")
    ] = False,
) -> None:
    """Print a submodel as JSON."""
    with _open(ctx, SubmodelRepositoryInterface) as api:
        sm_api = api.submodel_interface(submodel_id)
        try:
            result = sm_api.get_value() if value else sm_api.get()
        except ClientError as e:
            _fail(e)
    _echo_json(result)


@app.command("concept-descriptions")
def concept_descriptions(
    ctx: typer.Context,
    id_short: Annotated[Optional[str], typer.Option("--id-short", help="Filter by idShort")] = None,
) -> None:
    """List concept descriptions as 'id<TAB>idShort'."""
    criteria = ConceptDescriptionSearchCriteria(id_short=id_short)
    with _open(ctx, ConceptDescriptionRepositoryInterface) as api:
        try:
            items = api.get_all(criteria)
        except ClientError as e:
            _fail(e)
    for cd in items:
        typer.echo(f"{cd.id}\t{cd.id_short or ''}")


@app.command()
def lookup(
    ctx: typer.Context,
    asset_id: Annotated[
        Optional[list[str]],
        typer.Option("--asset-id", "-a", help="Specific asset id as NAME=VALUE (repeatable)"),
    ] = None,
    global_asset_id: Annotated[
        Optional[list[str]],
        typer.Option("--global-asset-id", "-g", help="Global asset id (repeatable)"),
    ] = None,
) -> None:
    """Find shell identifiers linked to the given assets."""
    links = [_parse_asset_id(raw) for raw in asset_id or ()]
    if not links and not global_asset_id:
        typer.echo("Error: give at least one --asset-id or --global-asset-id", err=True)
        raise typer.Exit(1)
    with _open(ctx, AASBasicDiscoveryInterface) as api:
        try:
            page = api.lookup_by_asset_link(links, global_asset_ids=global_asset_id or ())
        except ClientError as e:
            _fail(e)
    for aas_id in page:
        typer.echo(aas_id)


@app.command()
def version() -> None:
    """Show version information."""
    typer.echo(f"aas-client {__version__}")


if __name__ == "__main__":
    app()
