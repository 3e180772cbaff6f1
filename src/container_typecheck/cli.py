"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from typing import Any

import click

from container_typecheck.configuration import (
    DEFAULT_CONFIG_FILENAME,
    Configuration,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from container_typecheck.document_reading import DocumentReadError, read_data_document
from container_typecheck.type_checking import (
    EMPTY_REGISTRY,
    TypeCheckError,
    assert_elements_of_type,
    assert_structure,
    check_elements_of_type,
    check_structure,
    describe_type,
)


class CliError(Exception):
    """Custom CLI error."""


class CheckFailed(Exception):
    """Validation finished and the data did not satisfy the expected types."""


_DATA_OPTION = click.option(
    "--data",
    "data_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the YAML/JSON data document to inspect",
)
_SOFT_OPTION = click.option(
    "--soft",
    is_flag=True,
    default=False,
    help="Report valid/invalid without diagnostics instead of failing with the first error.",
)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="container-typecheck")
@click.option("--verbose", is_flag=True, default=False, help="Log validation details to stderr.")
def cli(verbose: bool) -> None:
    """Runtime type and shape checks for YAML/JSON container data."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s:%(name)s:%(message)s",
        )


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML check configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML check configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="describe")
@_DATA_OPTION
def describe(data_path: str) -> None:
    """Print the structural type signature of a data document."""
    click.echo(describe_type(_read_document(data_path)))


@cli.command(name="check-elements")
@_DATA_OPTION
@click.option(
    "--type",
    "expected_type",
    required=True,
    help="Expected element type (int, string, float, bool, array, object, callable, mixed)",
)
@click.option(
    "--recursive",
    is_flag=True,
    default=False,
    help="Descend into nested containers instead of matching them as elements.",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional check configuration supplying nominal types and max depth",
)
@_SOFT_OPTION
def check_elements(
    data_path: str,
    expected_type: str,
    recursive: bool,
    config_path: str | None,
    soft: bool,
) -> None:
    """Check that every element of a data document has the expected type."""
    document = _read_container(data_path)
    configuration = _load_optional_configuration(config_path)
    registry = configuration.build_registry() if configuration else EMPTY_REGISTRY
    max_depth = configuration.options.max_depth if configuration else None

    if soft:
        valid = check_elements_of_type(
            document, expected_type, recursive, registry=registry, max_depth=max_depth
        )
        _report_soft(valid)
        return
    _run_assert(
        assert_elements_of_type,
        document,
        expected_type,
        recursive,
        registry=registry,
        max_depth=max_depth,
    )


@cli.command(name="check-structure")
@_DATA_OPTION
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the check configuration holding the schema",
)
@_SOFT_OPTION
def check_structure_command(data_path: str, config_path: str, soft: bool) -> None:
    """Check a data document against the configured schema."""
    document = _read_document(data_path)
    configuration = _load_required_configuration(config_path)
    if configuration.schema is None:
        raise CliError(f"Configuration {configuration.path} does not define a schema.")
    keyword_args: dict[str, Any] = {
        "registry": configuration.build_registry(),
        "optional_marker": configuration.options.optional_marker,
        "max_depth": configuration.options.max_depth,
    }

    if soft:
        _report_soft(check_structure(document, configuration.schema.definition, **keyword_args))
        return
    _run_assert(assert_structure, document, configuration.schema.definition, **keyword_args)


def _run_assert(assertion: Callable[..., None], *args: Any, **kwargs: Any) -> None:
    try:
        assertion(*args, **kwargs)
    except TypeCheckError as exc:
        click.echo(str(exc), err=True)
        click.echo(f"path: {exc.path}", err=True)
        click.echo(f"expected: {exc.expected}", err=True)
        click.echo(f"actual: {exc.actual}", err=True)
        raise CheckFailed(str(exc)) from exc
    click.echo("ok")


def _report_soft(valid: bool) -> None:
    if valid:
        click.echo("valid")
        return
    click.echo("invalid")
    raise CheckFailed("invalid")


def _read_document(data_path: str) -> Any:
    try:
        return read_data_document(data_path)
    except DocumentReadError as exc:
        raise CliError(str(exc)) from exc


def _read_container(data_path: str) -> Any:
    document = _read_document(data_path)
    if not isinstance(document, list | dict):
        raise CliError(
            f"Data document {data_path} must contain a list or mapping, "
            f"got {describe_type(document)}."
        )
    return document


def _load_optional_configuration(config_path: str | None) -> Configuration | None:
    if config_path is None:
        return None
    return _load_required_configuration(config_path)


def _load_required_configuration(config_path: str) -> Configuration:
    try:
        return load_configuration(config_path)
    except ConfigurationError as exc:
        raise CliError(str(exc)) from exc


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except CheckFailed:
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
