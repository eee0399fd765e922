"""Serialize an aggregated manifest to YAML."""

from pathlib import Path
from typing import Union
import logging

import yaml

from ..config.constants import APP
from ..utils.file_utils import write_file

logger = logging.getLogger(__name__)


class ManifestDumper(yaml.SafeDumper):
    """SafeDumper that writes multi-line strings as literal blocks."""


def _represent_str(dumper: yaml.SafeDumper, value: str):
    if "\n" in value:
        return dumper.represent_scalar('tag:yaml.org,2002:str', value, style='|')
    return dumper.represent_scalar('tag:yaml.org,2002:str', value)


ManifestDumper.add_representer(str, _represent_str)


def render_manifest(manifest) -> str:
    """Render the manifest as YAML text preceded by the generated-file header."""
    body = yaml.dump(
        manifest.to_mapping(),
        Dumper=ManifestDumper,
        default_flow_style=False,
        allow_unicode=True,
        sort_keys=False,
        width=4096,
    )
    return f"{APP.generated_header}\n{body}"


def write_manifest(manifest, output_path: Union[str, Path]) -> bool:
    """Write the manifest to ``output_path``, creating parent directories.

    Returns:
        True if the file was written
    """
    logger.info(f"Writing results to \"{output_path}\"")
    return write_file(str(output_path), render_manifest(manifest))
