"""Init command for creating a default termboard.yml."""

import logging
from pathlib import Path

import yaml

from ..models.board_config import TermboardConfig
from ..services import ConfigService
from .output import info, success

logger = logging.getLogger(__name__)

CONFIG_FILE = ConfigService.CONFIG_FILE

# Header comments for generated file
CONFIG_HEADER = """\
# termboard Board Configuration
#
# board_file: Relative path to the JSON file holding the board
# csv_file:   Relative path used by `termboard export` / `termboard import`
#
# Column constraints:
#   - Between 1 and 8 columns
#   - Column names must be unique; they are the task status values
#   - Column order defines the move order (tasks move one column at a time)
#   - title is optional display text for the column header
#
# Example custom columns:
#   columns:
#     - name: Backlog
#     - name: Doing
#       title: "In Progress"
#     - name: Done

"""


def generate_config_yaml() -> str:
    """Generate YAML config from the default TermboardConfig model."""
    config_dict = TermboardConfig.default().model_dump()

    # Drop unset titles from columns
    for col in config_dict["board"]["columns"]:
        if col.get("title") is None:
            del col["title"]

    yaml_content = yaml.dump(config_dict, default_flow_style=False, sort_keys=False)
    return CONFIG_HEADER + yaml_content


def run_init(project_root: Path) -> int:
    """
    Write a default termboard.yml.

    Returns:
        Exit code (0 = created, 1 = nothing to do)
    """
    config_path = project_root / CONFIG_FILE
    if config_path.exists():
        info(f"Config exists: {config_path}")
        print("Nothing to generate.")
        return 1

    project_root.mkdir(parents=True, exist_ok=True)
    config_path.write_text(generate_config_yaml(), encoding="utf-8")
    logger.info("Generated %s", config_path)
    success(f"Generated config: {config_path}")
    return 0
