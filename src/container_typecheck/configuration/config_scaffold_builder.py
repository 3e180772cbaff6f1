"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "typecheck.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Check configuration template for container-typecheck.
# Replace every <REQUIRED> placeholder before running check-structure.
# Replace <OPTIONAL> placeholders only when your data needs them.

schema:
  # Provide either an inline schema mapping or a schema file path (YAML or JSON).
  # Values are type names (int, string, float, bool, array, object, callable,
  # mixed, or a name listed under types) or nested schemas.
  # Keys ending with the optional marker may be absent from the data.
  inline:
    "<REQUIRED>": "string"
  # path: "<OPTIONAL>"

options:
  optional_marker: "?"
  # max_depth: "<OPTIONAL>"

# Nominal types matched with isinstance, as name: "package.module:ClassName".
# types:
#   "<OPTIONAL>": "<OPTIONAL>"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML check configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder check configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Check configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
